"""
Configuration models for arm-models.

Provides type-safe configuration using pydantic with validation,
defaults, and schema enforcement.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnumGenerationConfig(BaseModel):
    """Settings for building enum classes from OpenAPI documents."""

    force_open: bool = Field(
        default=False,
        description="Build open enums even where modelAsString is not set",
    )
    lowercase_aliases: bool = Field(
        default=False,
        description="Accept the lowercased spelling of known values when decoding",
    )

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_output: bool = Field(
        default=True,
        description="Render log lines as JSON instead of console text",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {', '.join(LOG_LEVELS)}"
            )
        return level

    model_config = ConfigDict(extra="forbid")


class ArmModelsConfig(BaseModel):
    """Root configuration."""

    enums: EnumGenerationConfig = Field(
        default_factory=EnumGenerationConfig,
        description="Enum generation settings",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings",
    )

    model_config = ConfigDict(extra="forbid")
