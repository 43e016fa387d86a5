"""
Configuration management for arm-models.

Provides type-safe configuration loading and validation with support
for multiple configuration sources and priority-based merging.
"""

from ..exceptions import ConfigError
from .loader import ConfigLoader, create_default_config, load_config
from .models import ArmModelsConfig, EnumGenerationConfig, LoggingConfig

__all__ = [
    "ArmModelsConfig",
    "ConfigError",
    "ConfigLoader",
    "EnumGenerationConfig",
    "LoggingConfig",
    "create_default_config",
    "load_config",
]
