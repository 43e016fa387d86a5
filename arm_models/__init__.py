"""Typed ARM request/response records built on open enums."""

from .exceptions import ArmModelsError, ConfigError, SchemaError, SchemaLoadError
from .open_enum import (
    UNKNOWN_VALUE,
    LowercaseAliasOpenEnum,
    OpenEnum,
    decode,
    encode,
    is_known,
)
from .paging import AsyncPager, Continuable, Pager, PagerState
from .records import ArmModel, Flatten

__version__ = "0.1.0"

__all__ = [
    "UNKNOWN_VALUE",
    "ArmModel",
    "ArmModelsError",
    "AsyncPager",
    "ConfigError",
    "Continuable",
    "Flatten",
    "LowercaseAliasOpenEnum",
    "OpenEnum",
    "Pager",
    "PagerState",
    "SchemaError",
    "SchemaLoadError",
    "decode",
    "encode",
    "is_known",
]
