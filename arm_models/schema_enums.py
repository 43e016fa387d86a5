"""
Enum classes from OpenAPI (Swagger 2.0) documents.

Reads ``enum`` lists and their ``x-ms-enum`` extension and turns them into
Python enum classes. ``modelAsString`` enums are declared by the service as
subject to change, so they become ``OpenEnum`` subclasses; the rest become
strict ``(str, Enum)`` classes that reject values they do not know.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, Union

import yaml

from .exceptions import SchemaError, SchemaLoadError, wrap_parse_exception
from .open_enum import LowercaseAliasOpenEnum, OpenEnum

logger = logging.getLogger(__name__)

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z]{2,})|[A-Z]+[a-z]*\d*|[a-z]+\d*|\d+")


def symbol_for(wire: str) -> str:
    """
    Derive an UPPER_SNAKE member name from a wire string.

    Camel humps and punctuation separate words. An acronym keeps a short
    lowercase tail such as a version suffix (``"IPv4"`` becomes ``IPV4``).
    A leading digit gets an ``N`` prefix so that ``"386"`` becomes ``N386``.

    Examples:
        >>> symbol_for("InProgress")
        'IN_PROGRESS'
        >>> symbol_for("IKEv2")
        'IKEV2'
        >>> symbol_for("386")
        'N386'
        >>> symbol_for("chart_push")
        'CHART_PUSH'
    """
    words = _WORD.findall(wire)
    if not words:
        if not wire:
            return "EMPTY"
        return "VALUE_" + "_".join(f"{ord(char):X}" for char in wire)
    symbol = "_".join(word.upper() for word in words)
    if symbol[0].isdigit():
        symbol = "N" + symbol
    return symbol


def class_name_for(name: str) -> str:
    """PascalCase class name from a schema, property or parameter name."""
    words = _WORD.findall(name)
    class_name = "".join(word[:1].upper() + word[1:] for word in words)
    if not class_name:
        raise SchemaError(f"Cannot derive a class name from {name!r}", schema_name=name)
    if class_name[0].isdigit():
        class_name = "N" + class_name
    return class_name


@dataclass
class EnumMember:
    symbol: str
    value: str
    description: Optional[str] = None


@dataclass
class EnumSpec:
    """
    An enum declared in an OpenAPI document.

    Attributes:
        name: Class name for the enum
        members: Declared members in document order
        model_as_string: Whether ``x-ms-enum.modelAsString`` marks the enum
            as open to new values
        description: Schema description, used as the class docstring
        location: JSON pointer of the schema within its document
        default: Wire value named by the schema's ``default``, if any
    """

    name: str
    members: List[EnumMember] = field(default_factory=list)
    model_as_string: bool = False
    description: Optional[str] = None
    location: Optional[str] = None
    default: Optional[str] = None

    @property
    def values(self) -> List[str]:
        return [member.value for member in self.members]

    def build(
        self, force_open: bool = False, lowercase_aliases: bool = False
    ) -> Type[Enum]:
        """
        Create the enum class.

        The class gets a ``default`` attribute holding the member for the
        schema's default value, or None when the schema has none.

        Args:
            force_open: Build an open enum even if the schema is closed
            lowercase_aliases: Accept lowercased wire values on decode
                (open enums only)
        """
        names = [(member.symbol, member.value) for member in self.members]
        if self.model_as_string or force_open:
            base = LowercaseAliasOpenEnum if lowercase_aliases else OpenEnum
            enum_type = base(self.name, names, module=__name__)
        else:
            enum_type = Enum(self.name, names, type=str, module=__name__)
        if self.description:
            enum_type.__doc__ = self.description
        enum_type.default = None if self.default is None else enum_type(self.default)
        logger.debug(
            "Built enum %s (%s, %d members)",
            self.name,
            "open" if issubclass(enum_type, OpenEnum) else "closed",
            len(names),
        )
        return enum_type


def enum_spec_from_schema(
    name: str, schema: Mapping[str, Any], location: Optional[str] = None
) -> EnumSpec:
    """
    Read one enum schema.

    Args:
        name: Fallback name when the schema has no ``x-ms-enum.name``
        schema: The schema object holding ``enum``
        location: JSON pointer used in error messages

    Raises:
        SchemaError: If the enum is empty, holds non-string values, repeats
            a value or a derived member name, has a malformed ``x-ms-enum``,
            or names a default that is not one of its values
    """
    values = schema.get("enum")
    if not isinstance(values, list) or not values:
        raise SchemaError(
            "Enum schema must declare a non-empty list of values",
            schema_name=name,
            location=location,
        )

    x_ms_enum = schema.get("x-ms-enum")
    if x_ms_enum is None:
        x_ms_enum = {}
    elif not isinstance(x_ms_enum, Mapping):
        raise SchemaError(
            f"x-ms-enum must be an object, got {type(x_ms_enum).__name__}",
            schema_name=name,
            location=location,
        )
    declared_name = x_ms_enum.get("name")
    if declared_name is not None and not isinstance(declared_name, str):
        raise SchemaError(
            "x-ms-enum.name must be a string", schema_name=name, location=location
        )
    enum_name = class_name_for(declared_name or name)
    declared = _declared_values(x_ms_enum.get("values"), enum_name, location)

    members: List[EnumMember] = []
    seen_symbols: Dict[str, str] = {}
    for value in values:
        if not isinstance(value, str):
            raise SchemaError(
                f"Only string enum values are supported, got {value!r}",
                schema_name=enum_name,
                location=location,
            )
        if any(member.value == value for member in members):
            raise SchemaError(
                f"Duplicate enum value {value!r}",
                schema_name=enum_name,
                location=location,
            )
        entry = declared.get(value, {})
        symbol = symbol_for(entry.get("name") or value)
        if symbol in seen_symbols:
            raise SchemaError(
                f"Values {seen_symbols[symbol]!r} and {value!r} both map to member {symbol}",
                schema_name=enum_name,
                location=location,
            )
        seen_symbols[symbol] = value
        members.append(EnumMember(symbol, value, entry.get("description")))

    default = schema.get("default")
    if default is not None and default not in values:
        raise SchemaError(
            f"Default {default!r} is not one of the enum values",
            schema_name=enum_name,
            location=location,
        )

    return EnumSpec(
        name=enum_name,
        members=members,
        model_as_string=bool(x_ms_enum.get("modelAsString", False)),
        description=schema.get("description"),
        location=location,
        default=default,
    )


def _declared_values(
    entries: Any, enum_name: str, location: Optional[str]
) -> Dict[str, Mapping[str, Any]]:
    """Index ``x-ms-enum.values`` entries by wire value."""
    if entries is None:
        return {}
    if not isinstance(entries, list):
        raise SchemaError(
            "x-ms-enum.values must be a list", schema_name=enum_name, location=location
        )
    declared = {}
    for entry in entries:
        if not isinstance(entry, Mapping) or not isinstance(entry.get("value"), str):
            raise SchemaError(
                f"x-ms-enum.values entries need a string value, got {entry!r}",
                schema_name=enum_name,
                location=location,
            )
        if entry.get("name") is not None and not isinstance(entry["name"], str):
            raise SchemaError(
                f"x-ms-enum.values name for {entry['value']!r} must be a string",
                schema_name=enum_name,
                location=location,
            )
        declared[entry["value"]] = entry
    return declared


def _add(found: Dict[str, EnumSpec], spec: EnumSpec) -> None:
    existing = found.get(spec.name)
    if existing is None:
        found[spec.name] = spec
        return
    if existing.values != spec.values:
        raise SchemaError(
            f"Enum {spec.name} is declared twice with different values",
            schema_name=spec.name,
            location=spec.location,
            context={"first_location": existing.location},
        )
    logger.debug("Enum %s repeated at %s", spec.name, spec.location)


def _collect(
    found: Dict[str, EnumSpec], name: str, schema: Any, location: str
) -> None:
    if not isinstance(schema, Mapping):
        return
    if "enum" in schema:
        _add(found, enum_spec_from_schema(name, schema, location))

    properties = schema.get("properties") or {}
    for prop_name, prop in properties.items():
        _collect(
            found,
            class_name_for(name) + class_name_for(prop_name),
            prop,
            f"{location}/properties/{prop_name}",
        )

    items = schema.get("items")
    if isinstance(items, Mapping):
        _collect(found, name, items, f"{location}/items")

    for index, part in enumerate(schema.get("allOf") or []):
        _collect(found, name, part, f"{location}/allOf/{index}")


def collect_enums(document: Mapping[str, Any]) -> Dict[str, EnumSpec]:
    """
    Find every enum declared in a document's definitions and parameters.

    Enums without an ``x-ms-enum.name`` declared on a property are named
    after their parent definition and the property, e.g. ``status`` on
    ``BgpPeerStatus`` becomes ``BgpPeerStatusStatus``.

    Raises:
        SchemaError: If an enum schema is invalid, or one name is used for
            two different sets of values
    """
    found: Dict[str, EnumSpec] = {}
    for def_name, schema in (document.get("definitions") or {}).items():
        _collect(found, def_name, schema, f"#/definitions/{def_name}")

    for param_key, param in (document.get("parameters") or {}).items():
        if isinstance(param, Mapping) and "enum" in param:
            _add(
                found,
                enum_spec_from_schema(
                    param.get("name") or param_key,
                    param,
                    f"#/parameters/{param_key}",
                ),
            )

    logger.debug("Collected %d enums", len(found))
    return found


def build_enums(
    document: Mapping[str, Any],
    force_open: bool = False,
    lowercase_aliases: bool = False,
) -> Dict[str, Type[Enum]]:
    """Collect and build every enum in ``document``."""
    return {
        name: spec.build(force_open=force_open, lowercase_aliases=lowercase_aliases)
        for name, spec in collect_enums(document).items()
    }


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read an OpenAPI document from JSON, or YAML for ``.yaml``/``.yml`` files.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed, or its root is
            not an object
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                document = yaml.safe_load(f)
            else:
                document = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise wrap_parse_exception(e, str(path)) from e

    if not isinstance(document, dict):
        raise SchemaLoadError("Document root must be an object", path=str(path))
    logger.debug("Loaded OpenAPI document %s", path)
    return document
