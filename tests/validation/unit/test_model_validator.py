"""Model validator tests."""

from __future__ import annotations

import pytest
from schema_form_bridge.configuration.runtime_settings import BridgeOptions
from schema_form_bridge.schema_management.schema_resolution import SchemaError
from schema_form_bridge.validation.model_validator import ModelValidator
from schema_form_bridge.validation.validation_outcomes import ErrorDetail, ValidationFailure

_SCHEMA = {
    "definitions": {
        "address": {
            "type": "object",
            "properties": {
                "city": {"type": "string"},
                "country": {"type": "string", "default": "PL"},
            },
            "required": ["city"],
            "additionalProperties": False,
        }
    },
    "type": "object",
    "properties": {
        "age": {"type": "integer", "default": 24},
        "address": {"$ref": "#/definitions/address"},
        "tags": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["address"],
}


def _failure(model: object, options: BridgeOptions | None = None) -> ValidationFailure:
    with pytest.raises(ValidationFailure) as excinfo:
        ModelValidator(_SCHEMA, options).validate(model)
    return excinfo.value


def test_valid_model_is_returned_as_copy() -> None:
    model = {"address": {"city": "Warsaw"}}

    cleaned = ModelValidator(_SCHEMA).validate(model)

    assert cleaned == model
    assert cleaned is not model


def test_all_errors_are_reported_by_default() -> None:
    failure = _failure({"age": "old", "address": {}, "tags": ["a", 1]})

    assert set(failure.details) == {
        ErrorDetail(path=".age", message="'old' is not of type 'integer'"),
        ErrorDetail(path=".address.city", message="'city' is a required property"),
        ErrorDetail(path=".tags[1]", message="1 is not of type 'string'"),
    }


def test_only_first_error_when_all_errors_disabled() -> None:
    failure = _failure({"age": "old", "address": {}}, BridgeOptions(all_errors=False))

    assert len(failure.details) == 1


def test_missing_root_property_points_at_property() -> None:
    failure = _failure({})

    assert failure.details == (
        ErrorDetail(path=".address", message="'address' is a required property"),
    )
    assert str(failure) == "1 validation error(s): .address: 'address' is a required property"


def test_use_defaults_fills_missing_properties() -> None:
    validator = ModelValidator(_SCHEMA, BridgeOptions(use_defaults=True))
    model = {"address": {"city": "Warsaw"}}

    cleaned = validator.validate(model)

    assert cleaned == {"age": 24, "address": {"city": "Warsaw", "country": "PL"}}
    assert model == {"address": {"city": "Warsaw"}}


def test_additional_properties_are_errors_without_removal() -> None:
    failure = _failure({"address": {"city": "Warsaw", "zip": "00-001"}})

    assert [detail.path for detail in failure.details] == [".address"]


def test_remove_additional_drops_only_forbidden_properties() -> None:
    validator = ModelValidator(_SCHEMA, BridgeOptions(remove_additional=True))

    cleaned = validator.validate({"address": {"city": "Warsaw", "zip": "00-001"}, "extra": 1})

    assert cleaned == {"address": {"city": "Warsaw"}, "extra": 1}


def test_remove_additional_all_drops_every_undeclared_property() -> None:
    validator = ModelValidator(_SCHEMA, BridgeOptions(remove_additional="all"))

    cleaned = validator.validate({"address": {"city": "Warsaw", "zip": "00-001"}, "extra": 1})

    assert cleaned == {"address": {"city": "Warsaw"}}


def test_invalid_schema_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="Invalid draft-07 schema"):
        ModelValidator({"type": "object", "properties": {"age": {"type": 5}}})
