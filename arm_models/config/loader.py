"""
Configuration loader for arm-models.

Handles loading from multiple sources with proper priority:
CLI Args > Environment Variables > Config File > Defaults
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from .models import ArmModelsConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Loads and merges configuration from multiple sources.

    Priority order (highest to lowest):
    1. CLI arguments (passed directly to methods)
    2. Environment variables (ARM_MODELS_*)
    3. Configuration file
    4. Default values
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".config" / "arm-models"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
    ENV_PREFIX = "ARM_MODELS_"
    PATH_ENV_VAR = "ARM_MODELS_CONFIG_PATH"

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to configuration file. If None, uses default location.
        """
        self.config_path = config_path or self._get_config_path_from_env()

    @classmethod
    def _get_config_path_from_env(cls) -> Path:
        """Get configuration path from environment variable or default."""
        env_path = os.environ.get(cls.PATH_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        return cls.DEFAULT_CONFIG_FILE

    def load(self) -> ArmModelsConfig:
        """
        Load configuration from all sources and merge.

        Returns:
            Validated ArmModelsConfig object

        Raises:
            ConfigError: If configuration is invalid
        """
        config_dict: dict[str, Any] = {}

        if self.config_path.exists():
            logger.debug("Loading configuration from %s", self.config_path)
            file_config = self._load_file(self.config_path)
            config_dict = self._deep_merge(config_dict, file_config)

        env_config = self._load_from_env()
        config_dict = self._deep_merge(config_dict, env_config)

        try:
            return ArmModelsConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(
                f"Configuration validation failed: {e}",
                context={"path": str(self.config_path)},
                cause=e,
            ) from e

    def _load_file(self, path: Path) -> dict[str, Any]:
        """
        Load configuration from YAML file.

        Raises:
            ConfigError: If file cannot be read or parsed
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}", cause=e) from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}", cause=e) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    def _load_from_env(self) -> dict[str, Any]:
        """
        Load configuration from environment variables.

        Environment variable format:
        - ARM_MODELS_ENUMS__FORCE_OPEN
        - ARM_MODELS_LOGGING__LEVEL

        Double underscore (__) separates nested keys. The config path
        variable itself is skipped.
        """
        config: dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX) or key == self.PATH_ENV_VAR:
                continue

            config_key = key[len(self.ENV_PREFIX) :].lower()
            parts = config_key.split("__")

            current = config
            for part in parts[:-1]:
                if part not in current:
                    current[part] = {}
                current = current[part]

            current[parts[-1]] = self._convert_env_value(value)

        return config

    def _convert_env_value(self, value: str) -> Any:
        """Convert environment variable string to bool, int, float, or str."""
        if value.lower() in ("true", "yes", "1"):
            return True
        if value.lower() in ("false", "no", "0"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(
        self, base: dict[str, Any], update: dict[str, Any]
    ) -> dict[str, Any]:
        """Deep merge two dictionaries without modifying ``base``."""
        result = base.copy()

        for key, value in update.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def merge_cli_args(
        self,
        config: ArmModelsConfig,
        cli_args: dict[str, Any],
    ) -> ArmModelsConfig:
        """
        Merge CLI arguments into configuration.

        CLI arguments have highest priority and override all other sources.
        None values are ignored.
        """
        filtered_args = self._filter_none_values(cli_args)

        if not filtered_args:
            return config

        config_dict = self._deep_merge(config.model_dump(), filtered_args)
        try:
            return ArmModelsConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid command line settings: {e}", cause=e) from e

    def _filter_none_values(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively filter out None values from a dictionary."""
        result = {}
        for key, value in data.items():
            if value is None:
                continue
            elif isinstance(value, dict):
                filtered = self._filter_none_values(value)
                if filtered:
                    result[key] = filtered
            else:
                result[key] = value
        return result

    def create_default_config(self, force: bool = False) -> Path:
        """
        Create default configuration file with comments.

        Raises:
            ConfigError: If file exists and force=False
        """
        if self.config_path.exists() and not force:
            raise ConfigError(
                f"Configuration file already exists at {self.config_path}.",
                recovery_suggestion="Use --force to overwrite",
            )

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                f.write(DEFAULT_CONFIG_YAML)
        except OSError as e:
            raise ConfigError(
                f"Cannot write config file {self.config_path}: {e}", cause=e
            ) from e

        logger.debug("Wrote default configuration to %s", self.config_path)
        return self.config_path


DEFAULT_CONFIG_YAML = """\
# arm-models configuration
# ========================

# Enum generation from OpenAPI documents
enums:
  # Build open enums (unknown values are kept, not rejected) even where
  # the schema does not set x-ms-enum.modelAsString
  force_open: false

  # Also accept the all-lowercase spelling of known values when decoding
  lowercase_aliases: false

# Logging
logging:
  # DEBUG, INFO, WARNING, ERROR or CRITICAL
  level: INFO

  # Render log lines as JSON (false for human-readable console output)
  json_output: true
"""


def load_config(
    config_path: Optional[Path] = None,
    cli_args: Optional[dict[str, Any]] = None,
) -> ArmModelsConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to configuration file
        cli_args: CLI arguments to merge (highest priority)

    Raises:
        ConfigError: If configuration is invalid
    """
    loader = ConfigLoader(config_path)
    config = loader.load()

    if cli_args:
        config = loader.merge_cli_args(config, cli_args)

    return config


def create_default_config(
    config_path: Optional[Path] = None,
    force: bool = False,
) -> Path:
    """Create default configuration file; see ``ConfigLoader.create_default_config``."""
    loader = ConfigLoader(config_path)
    return loader.create_default_config(force=force)
