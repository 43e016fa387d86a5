"""
Base class for generated request/response records.

Records mirror the JSON schema of an ARM resource provider one field at a
time. Every field carries its camelCase wire name as an alias. The helpers
here implement the wire rules shared by all records:

- absent optional fields (``None``) are left out of the payload, while
  empty lists are sent as ``[]``;
- unknown keys in a payload are ignored;
- ``Flatten`` components are embedded at the containing record's level
  instead of being nested under their own key, in payloads and in
  the JSON schema alike.
"""

import copy
from typing import Any, Dict, Mapping, Set, Type, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    GetJsonSchemaHandler,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema

M = TypeVar("M", bound="ArmModel")


class Flatten:
    """
    Field marker for ``Annotated[Component, Flatten()]``.

    The component's fields are read from, and written to, the same level
    as the containing record's own fields.
    """

    def __repr__(self) -> str:
        return "Flatten()"


class ArmModel(BaseModel):
    """Base for every ARM wire record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def flattened_fields(cls) -> Dict[str, Type["ArmModel"]]:
        """Names of flattened fields mapped to their component record type."""
        flattened = {}
        for name, info in cls.model_fields.items():
            if any(isinstance(marker, Flatten) for marker in info.metadata):
                flattened[name] = info.annotation
        return flattened

    @classmethod
    def wire_keys(cls) -> Set[str]:
        """Every key this record may occupy in a flat payload."""
        keys: Set[str] = set()
        flattened = cls.flattened_fields()
        for name, info in cls.model_fields.items():
            if name in flattened:
                keys |= flattened[name].wire_keys()
            else:
                keys.add(info.alias or name)
                keys.add(name)
        return keys

    @classmethod
    def _own_keys(cls) -> Set[str]:
        keys: Set[str] = set()
        flattened = cls.flattened_fields()
        for name, info in cls.model_fields.items():
            keys.add(name)
            if name not in flattened and info.alias:
                keys.add(info.alias)
        return keys

    @model_validator(mode="before")
    @classmethod
    def _gather_flattened(cls, data: Any) -> Any:
        flattened = cls.flattened_fields()
        if not flattened or not isinstance(data, Mapping):
            return data

        data = dict(data)
        own = cls._own_keys()
        for name, component in flattened.items():
            alias = cls.model_fields[name].alias
            if name in data or (alias and alias in data):
                continue
            data[name] = {
                key: data.pop(key)
                for key in list(data)
                if key in component.wire_keys() and key not in own
            }
        return data

    @model_serializer(mode="wrap")
    def _spread_flattened(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Any:
        data = handler(self)
        flattened = type(self).flattened_fields()
        if not flattened or not isinstance(data, dict):
            return data

        flat_keys = set()
        for name in flattened:
            alias = type(self).model_fields[name].alias
            flat_keys.add(alias if info.by_alias and alias else name)

        spread: Dict[str, Any] = {}
        for key, value in data.items():
            if key in flat_keys and isinstance(value, dict):
                for inner_key, inner_value in value.items():
                    if inner_key not in data:
                        spread[inner_key] = inner_value
            else:
                spread[key] = value
        return spread

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(core_schema)
        flattened = cls.flattened_fields()
        if not flattened:
            return json_schema

        json_schema = handler.resolve_ref_schema(json_schema)
        properties = json_schema.get("properties")
        if not properties:
            return json_schema

        required = json_schema.get("required", [])
        for name in flattened:
            key = cls.model_fields[name].alias or name
            prop = properties.pop(key, None)
            if prop is None:
                continue
            if key in required:
                required.remove(key)
            ref = prop["allOf"][0] if "allOf" in prop else prop
            component = handler.resolve_ref_schema(ref)
            for inner_key, value in component.get("properties", {}).items():
                properties.setdefault(inner_key, copy.deepcopy(value))
            for inner_key in component.get("required", []):
                if inner_key not in required:
                    required.append(inner_key)
        if required:
            json_schema["required"] = required
        else:
            json_schema.pop("required", None)
        return json_schema

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict using wire names, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls: Type[M], payload: Mapping[str, Any]) -> M:
        """
        Build a record from a decoded JSON payload.

        Raises:
            pydantic.ValidationError: If the payload does not fit the schema
        """
        return cls.model_validate(payload)

    @classmethod
    def from_json(cls: Type[M], text: str) -> M:
        return cls.model_validate_json(text)
