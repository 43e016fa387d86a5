"""
arm-models command line interface.

Inspects the enums declared in OpenAPI documents and shows how wire values
decode against them.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import click
import structlog
import yaml
from rich.console import Console
from rich.table import Table

from .config import ArmModelsConfig, ConfigLoader, load_config
from .exceptions import ArmModelsError
from .logging_config import configure_logging
from .open_enum import OpenEnum, decode, encode
from .schema_enums import collect_enums, load_document

logger = structlog.get_logger(__name__)


def _config(ctx: click.Context) -> ArmModelsConfig:
    error = ctx.obj.get("config_error")
    if error is not None:
        click.echo(f"❌ {error}", err=True)
        sys.exit(1)
    return ctx.obj["config"]


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides the config file.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str], config_path: Optional[Path]) -> None:
    """arm-models - inspect open enums declared in ARM OpenAPI documents."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    try:
        config = load_config(config_path, {"logging": {"level": log_level}})
    except ArmModelsError as e:
        if ctx.invoked_subcommand != "config":
            click.echo(f"❌ {e}", err=True)
            sys.exit(1)
        # "config init" must still be able to replace a broken file.
        ctx.obj["config_error"] = e
        config = ArmModelsConfig()
        configure_logging(log_level or config.logging.level, config.logging.json_output)
        logger.warning("Ignoring invalid configuration", **e.to_dict())
    else:
        configure_logging(config.logging.level, config.logging.json_output)
    ctx.obj["config"] = config


@cli.command()
@click.argument("document", type=click.Path(path_type=Path))
@click.option("--open-only", is_flag=True, help="Only list enums that accept unknown values.")
@click.pass_context
def inspect(ctx: click.Context, document: Path, open_only: bool) -> None:
    """List the enums declared in an OpenAPI DOCUMENT."""
    config = _config(ctx)
    try:
        specs = collect_enums(load_document(document))
    except ArmModelsError as e:
        logger.error("Failed to inspect document", path=str(document), **e.to_dict())
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    table = Table(title=f"Enums in {document.name}")
    table.add_column("Enum", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Wire values", overflow="fold")

    shown = 0
    for name in sorted(specs):
        spec = specs[name]
        is_open = spec.model_as_string or config.enums.force_open
        if open_only and not is_open:
            continue
        table.add_row(name, "open" if is_open else "closed", ", ".join(spec.values))
        shown += 1

    Console().print(table)
    click.echo(f"{shown} enum(s)")


@cli.command("decode")
@click.argument("document", type=click.Path(path_type=Path))
@click.argument("enum_name")
@click.argument("value")
@click.pass_context
def decode_command(ctx: click.Context, document: Path, enum_name: str, value: str) -> None:
    """Decode VALUE against ENUM_NAME from an OpenAPI DOCUMENT."""
    config = _config(ctx)
    try:
        specs = collect_enums(load_document(document))
        if enum_name not in specs:
            raise ArmModelsError(
                f"No enum named {enum_name} in {document}",
                error_code="ENUM_NOT_FOUND",
                recovery_suggestion="Run 'arm-models inspect' to list available enums",
            )
        enum_type = specs[enum_name].build(
            force_open=config.enums.force_open,
            lowercase_aliases=config.enums.lowercase_aliases,
        )
    except ArmModelsError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    if issubclass(enum_type, OpenEnum):
        member = decode(enum_type, value)
        known = member.is_known
        wire = encode(member)
    else:
        member = _decode_closed(enum_type, value)
        if member is None:
            click.echo(f"❌ {value!r} is not a value of closed enum {enum_name}", err=True)
            sys.exit(1)
        known = True
        wire = member.value

    logger.debug("Decoded value", enum=enum_name, value=value, known=known)
    click.echo(f"enum:   {enum_name}")
    click.echo(f"symbol: {member.name}")
    click.echo(f"wire:   {wire}")
    click.echo(f"known:  {'yes' if known else 'no'}")


def _decode_closed(enum_type: type[Enum], value: str) -> Optional[Enum]:
    try:
        return enum_type(value)
    except ValueError:
        return None


@cli.group()
def config() -> None:
    """Manage the arm-models configuration file."""


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file.")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write a commented default configuration file."""
    loader = ConfigLoader(ctx.obj.get("config_path"))
    try:
        path = loader.create_default_config(force=force)
    except ArmModelsError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    click.echo(f"Configuration written to {path}")


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the effective configuration."""
    click.echo(yaml.safe_dump(_config(ctx).model_dump(), sort_keys=False).rstrip())


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
