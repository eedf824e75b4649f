"""Initial value computation tests."""

from __future__ import annotations

import pytest
from schema_form_bridge.form_bridge.initial_values import compute_initial_value
from schema_form_bridge.schema_management.path_resolution import FieldNotFoundError, PathResolver
from schema_form_bridge.schema_management.schema_resolution import SchemaResolver


def _paths() -> PathResolver:
    schema = {
        "type": "object",
        "properties": {
            "enabled": {"type": "boolean", "default": False},
            "retries": {"type": "integer", "default": 0},
            "nickname": {"type": "string"},
            "tags": {"type": "array", "items": {"type": "string", "default": "new"}},
            "presets": {"type": "array", "items": {"type": "string"}, "default": ["a"]},
            "settings": {
                "type": "object",
                "properties": {"theme": {"type": "string", "default": "dark"}},
            },
            "limits": {"type": "object", "default": {"max": 3}},
            "point": {"type": "array", "items": [{"type": "integer", "default": 1}]},
            "rows": {
                "type": "array",
                "items": {"type": "array", "items": {"type": "integer"}},
            },
        },
    }
    return PathResolver(SchemaResolver(schema))


def test_falsy_defaults_are_returned_as_is() -> None:
    paths = _paths()

    assert compute_initial_value(paths, "enabled") is False
    assert compute_initial_value(paths, "retries") == 0


def test_scalar_without_default_is_none() -> None:
    assert compute_initial_value(_paths(), "nickname") is None


def test_objects_start_empty_without_nested_defaults() -> None:
    paths = _paths()

    assert compute_initial_value(paths, "settings") == {}
    assert compute_initial_value(paths, "settings.theme") == "dark"


def test_object_default_is_copied() -> None:
    paths = _paths()

    value = compute_initial_value(paths, "limits")
    value["max"] = 10

    assert compute_initial_value(paths, "limits") == {"max": 3}


def test_arrays_are_populated_with_item_initial_values() -> None:
    paths = _paths()

    assert compute_initial_value(paths, "tags") == []
    assert compute_initial_value(paths, "tags", initial_count=2) == ["new", "new"]


def test_array_default_applies_without_count() -> None:
    paths = _paths()

    assert compute_initial_value(paths, "presets") == ["a"]
    assert compute_initial_value(paths, "presets", initial_count=1) == [None]


def test_nested_array_elements_are_independent() -> None:
    value = compute_initial_value(_paths(), "rows", initial_count=2)
    value[0].append(1)

    assert value == [[1], []]


def test_tuple_arrays_pad_past_their_length() -> None:
    paths = _paths()

    assert compute_initial_value(paths, "point", initial_count=1) == [1]
    value = compute_initial_value(paths, "point", initial_count=3)

    assert len(value) == 3
    assert value == [1, None, None]


def test_tuple_element_paths_stay_bounded() -> None:
    with pytest.raises(FieldNotFoundError):
        compute_initial_value(_paths(), "point.1")
