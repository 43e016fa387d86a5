"""
Open enumerations for wire values that may grow over time.

ARM specifications mark most enums ``x-ms-enum.modelAsString``: the service
is free to start returning values an older client has never seen. An
``OpenEnum`` keeps the known values as ordinary enum members and represents
anything else as a fallback member of the same class that carries the
original string. Decoding never fails and encoding always gives back the
exact string that was read.

Example:
    >>> class Status(OpenEnum):
    ...     ENABLED = "enabled"
    ...     DISABLED = "disabled"
    >>> decode(Status, "enabled") is Status.ENABLED
    True
    >>> archived = decode(Status, "archived")
    >>> archived.is_known, encode(archived)
    (False, 'archived')
"""

from enum import Enum
from typing import Any, Tuple, Type, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

UNKNOWN_VALUE = "UNKNOWN_VALUE"

E = TypeVar("E", bound="OpenEnum")


class OpenEnum(str, Enum):
    """
    Base class for enums whose wire values are not a closed set.

    Members compare equal to their wire string. Fallback members are
    created on every decode of an unrecognized value and are never added
    to the class, so two fallbacks carrying the same string are equal but
    not identical.
    """

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if not isinstance(value, str):
            return None
        return cls.unknown_value(value)

    @classmethod
    def unknown_value(cls: Type[E], wire: str) -> E:
        """Build the fallback member carrying ``wire`` verbatim."""
        member = str.__new__(cls, wire)
        member._name_ = UNKNOWN_VALUE
        member._value_ = wire
        return member

    @classmethod
    def known_values(cls) -> Tuple[str, ...]:
        """Declared wire strings, in declaration order."""
        return tuple(member.value for member in cls)

    @property
    def is_known(self) -> bool:
        return type(self)._member_map_.get(self._name_) is self

    def __str__(self) -> str:
        return self._value_

    def __reduce_ex__(self, proto: Any) -> Any:
        # Fallbacks have no class attribute to be found by name.
        return type(self), (self._value_,)

    @classmethod
    def _from_field_value(cls, value: Any) -> Any:
        if isinstance(value, cls):
            return value
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            return decode(cls, value)
        raise ValueError(
            f"{cls.__name__} expects a string, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._from_field_value,
            serialization=core_schema.plain_serializer_function_ser_schema(
                encode, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "examples": list(cls.known_values()),
            "x-ms-enum": {"name": cls.__name__, "modelAsString": True},
        }


class LowercaseAliasOpenEnum(OpenEnum):
    """
    Open enum that also accepts the all-lowercase spelling of a known value.

    Some services echo enum values back lowercased. Exact matches win;
    encoding always produces the declared spelling.
    """

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value:
                    return member
        return super()._missing_(value)


def decode(enum_type: Type[E], wire: str) -> E:
    """
    Map a wire string onto ``enum_type``.

    Returns the known member whose declared wire string equals ``wire``
    (case-sensitive), otherwise a fallback member carrying ``wire``.
    """
    return enum_type(wire)


def encode(value: OpenEnum) -> str:
    """Return the wire string for a known or fallback member."""
    return value._value_


def is_known(value: OpenEnum) -> bool:
    return value.is_known
