"""UI-facing field property derivation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from typing import Any

from schema_form_bridge.schema_management.path_resolution import (
    PathResolver,
    is_index_segment,
    split_path,
)
from schema_form_bridge.schema_management.schema_models import WILDCARD_SEGMENT
from schema_form_bridge.schema_management.schema_resolution import SchemaError

from .bridge_models import LogicalType
from .type_mapping import UnrepresentableTypeError, map_logical_type, schema_type_name

_SEPARATOR_PATTERN = re.compile(r"[\s_\-]+")
_CAMEL_BOUNDARY_PATTERN = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

_DERIVED_KEYS = frozenset({"label", "placeholder", "options", "allowed_values"})


class OptionsKind(str, Enum):
    """Declared shape of a field's selectable options."""

    PAIR_LIST = "pair_list"
    MAPPING = "mapping"


@dataclass(frozen=True)
class FieldOptions:
    """Normalized options: the selectable values and what each displays as.

    Pair lists select by `value` and display the `label`; mappings select by
    key and transform to the mapped value.
    """

    kind: OptionsKind
    allowed_values: tuple[Any, ...]
    transformed: tuple[Any, ...]

    def transform(self, value: Any) -> Any:
        """Return the counterpart of an allowed value; unknown values pass through."""
        for candidate, result in zip(self.allowed_values, self.transformed, strict=True):
            if candidate == value:
                return result
        return value


def parse_options(raw_options: Any) -> FieldOptions:
    """Normalize a `{label, value}` pair list or a label-to-value mapping."""
    if isinstance(raw_options, Mapping):
        return FieldOptions(
            kind=OptionsKind.MAPPING,
            allowed_values=tuple(raw_options.keys()),
            transformed=tuple(raw_options.values()),
        )
    if isinstance(raw_options, list):
        values: list[Any] = []
        labels: list[Any] = []
        for entry in raw_options:
            if isinstance(entry, Mapping):
                if "value" not in entry:
                    raise SchemaError("Option entries must declare a value.")
                values.append(entry["value"])
                labels.append(entry.get("label", entry["value"]))
            else:
                values.append(entry)
                labels.append(entry)
        return FieldOptions(
            kind=OptionsKind.PAIR_LIST,
            allowed_values=tuple(values),
            transformed=tuple(labels),
        )
    raise SchemaError(f"Options must be a list or a mapping, got {type(raw_options).__name__}.")


def derive_title(name: str) -> str:
    """Turn a field name into sentence-case title text (`dateOfBirth` -> `Date of birth`)."""
    if name == WILDCARD_SEGMENT or is_index_segment(name):
        return ""
    words = [
        word
        for chunk in _SEPARATOR_PATTERN.split(name)
        for word in _CAMEL_BOUNDARY_PATTERN.split(chunk)
        if word
    ]
    if not words:
        return ""
    sentence = " ".join(
        word if len(word) > 1 and word.isupper() else word.lower() for word in words
    )
    return sentence[0].upper() + sentence[1:]


def compute_field_props(
    paths: PathResolver, path: str, caller_props: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Derive the props a form field is rendered with.

    Caller props override schema-derived values, except `label` and
    `placeholder` which are interpreted (`True` requests the derived title).
    Unrecognized caller keys pass through unchanged. Malformed caller
    `options` raise TypeError; malformed schema options raise SchemaError.
    """
    props = dict(caller_props or {})
    field = paths.get_field(path)
    parent = paths.get_parent(path)
    segments = split_path(path)
    name = segments[-1] if segments else ""
    title = derive_title(name)

    result: dict[str, Any] = {
        "required": _is_required(name, parent),
        "label": _resolve_label(props, title),
    }

    if "placeholder" in props:
        placeholder = props["placeholder"]
        if _is_text_field(path, field) and placeholder is True:
            placeholder = title
        result["placeholder"] = placeholder

    raw_options, options = _field_options(path, props, field)
    if options is not None:
        result["options"] = deepcopy(raw_options)
        result["allowed_values"] = list(options.allowed_values)
        result["transform"] = options.transform
    elif isinstance(field.get("enum"), list):
        result["allowed_values"] = list(field["enum"])
    if "allowed_values" in props:
        result["allowed_values"] = props["allowed_values"]

    if schema_type_name(field) == "number":
        result["decimal"] = True

    result.update((key, value) for key, value in props.items() if key not in _DERIVED_KEYS)
    return result


def _field_options(
    path: str, props: Mapping[str, Any], field: Mapping[str, Any]
) -> tuple[Any, FieldOptions | None]:
    if "options" not in props:
        raw_options = field.get("options")
        return raw_options, None if raw_options is None else parse_options(raw_options)
    raw_options = props["options"]
    if raw_options is None:
        return None, None
    try:
        return raw_options, parse_options(raw_options)
    except SchemaError as exc:
        raise TypeError(f"Invalid options prop for field '{path}': {exc}") from exc


def _is_required(name: str, parent: Mapping[str, Any] | None) -> bool:
    if parent is None:
        return False
    required = parent.get("required")
    return isinstance(required, list) and name in required


def _resolve_label(props: Mapping[str, Any], title: str) -> Any:
    if "label" not in props or props["label"] is True:
        return title
    return props["label"] or ""


def _is_text_field(path: str, field: Mapping[str, Any]) -> bool:
    try:
        return map_logical_type(path, field) is LogicalType.TEXT
    except UnrepresentableTypeError:
        return False
