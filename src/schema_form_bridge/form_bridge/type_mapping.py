"""Mapping from declared JSON Schema types to logical field types."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_form_bridge.schema_management.path_resolution import declared_types

from .bridge_models import LogicalType

_DATE_TIME_FORMAT = "date-time"

_TYPE_CATEGORIES: dict[str, LogicalType] = {
    "string": LogicalType.TEXT,
    "integer": LogicalType.NUMBER,
    "number": LogicalType.NUMBER,
    "boolean": LogicalType.BOOLEAN,
    "array": LogicalType.LIST,
    "object": LogicalType.STRUCTURE,
}


class UnrepresentableTypeError(TypeError):
    """Raised when a field's schema type has no logical category."""

    def __init__(self, path: str, type_name: str) -> None:
        super().__init__(f"Field '{path}' can not be represented as a type {type_name}")
        self.path = path
        self.type_name = type_name


def map_logical_type(path: str, field: Mapping[str, Any]) -> LogicalType:
    """Return the logical category of a resolved field schema."""
    type_name = schema_type_name(field)
    if type_name == "string" and field.get("format") == _DATE_TIME_FORMAT:
        return LogicalType.DATE_TIME
    category = _TYPE_CATEGORIES.get(type_name) if type_name else None
    if category is None:
        raise UnrepresentableTypeError(path, type_name or "unknown")
    return category


def schema_type_name(field: Mapping[str, Any]) -> str | None:
    """Return the effective JSON type name, inferring it when `type` is absent."""
    types = declared_types(field)
    if types:
        return types[0]
    if "properties" in field:
        return "object"
    if "items" in field:
        return "array"

    enum = field.get("enum")
    if isinstance(enum, list) and enum:
        samples = enum
    elif "default" in field:
        samples = [field["default"]]
    else:
        return None

    inferred = {_json_type_of(value) for value in samples}
    if inferred == {"integer", "number"}:
        return "number"
    if len(inferred) == 1:
        return inferred.pop()
    return None


def _json_type_of(value: Any) -> str | None:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return None
