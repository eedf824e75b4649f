"""Draft-07 model validation producing bridge error payloads."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from copy import deepcopy
from typing import Any

from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import SchemaError as JsonSchemaError
from jsonschema.exceptions import ValidationError

from schema_form_bridge.configuration.runtime_settings import BridgeOptions, RemoveAdditional
from schema_form_bridge.schema_management.schema_resolution import SchemaError, SchemaResolver

from .validation_outcomes import ErrorDetail, ValidationFailure

_LOGGER = logging.getLogger(__name__)

_REQUIRED_PATTERN = re.compile(r"'([^']+)' is a required property")

KeywordValidator = Callable[[Any, Any, Any, Mapping[str, Any]], Iterator[ValidationError]]


class ModelValidator:
    """Validate form models against a schema with bridge options applied.

    `use_defaults` and `remove_additional` mutate a private copy of the model;
    the cleaned copy is returned on success.
    """

    def __init__(self, schema: Mapping[str, Any], options: BridgeOptions | None = None) -> None:
        try:
            Draft7Validator.check_schema(schema)
        except JsonSchemaError as exc:
            raise SchemaError(f"Invalid draft-07 schema: {exc.message}") from exc
        self._schema = schema
        self._options = options or BridgeOptions()
        self._resolver = SchemaResolver(schema)
        self._validator_class = _extend_validator(self._options, self._resolver)

    @property
    def options(self) -> BridgeOptions:
        return self._options

    def validate(self, model: Any) -> Any:
        """Return the validated model copy or raise ValidationFailure."""
        cleaned = deepcopy(model)
        validator = self._validator_class(self._schema)
        errors: Iterator[ValidationError] = validator.iter_errors(cleaned)
        if self._options.all_errors:
            reported = list(errors)
        else:
            first = next(errors, None)
            reported = [] if first is None else [first]

        if reported:
            _LOGGER.debug("Model failed validation with %d error(s)", len(reported))
            raise ValidationFailure(
                ErrorDetail(path=_error_path(error), message=error.message) for error in reported
            )
        return cleaned


def _extend_validator(options: BridgeOptions, resolver: SchemaResolver) -> Any:
    validate_properties: KeywordValidator = Draft7Validator.VALIDATORS["properties"]
    validate_additional: KeywordValidator = Draft7Validator.VALIDATORS["additionalProperties"]

    def properties(
        validator: Any, properties: Any, instance: Any, schema: Mapping[str, Any]
    ) -> Iterator[ValidationError]:
        if validator.is_type(instance, "object") and isinstance(properties, Mapping):
            if options.use_defaults:
                _apply_defaults(instance, properties, resolver)
            if _removes_additional(options.remove_additional, schema):
                for name in [key for key in instance if key not in properties]:
                    del instance[name]
        yield from validate_properties(validator, properties, instance, schema)

    def additional_properties(
        validator: Any, additional: Any, instance: Any, schema: Mapping[str, Any]
    ) -> Iterator[ValidationError]:
        if _removes_additional(options.remove_additional, schema) and "properties" in schema:
            return
        yield from validate_additional(validator, additional, instance, schema)

    return validators.extend(
        Draft7Validator,
        {"properties": properties, "additionalProperties": additional_properties},
    )


def _apply_defaults(
    instance: dict[str, Any], properties: Mapping[str, Any], resolver: SchemaResolver
) -> None:
    for name, subschema in properties.items():
        if name in instance or not isinstance(subschema, Mapping):
            continue
        resolved = resolver.resolve(subschema)
        if "default" in resolved:
            instance[name] = deepcopy(resolved["default"])


def _removes_additional(mode: RemoveAdditional, schema: Mapping[str, Any]) -> bool:
    if mode == "all":
        return True
    return mode is True and schema.get("additionalProperties") is False


def _error_path(error: ValidationError) -> str:
    parts: list[Any] = list(error.absolute_path)
    if error.validator == "required":
        match = _REQUIRED_PATTERN.search(error.message)
        if match:
            parts.append(match.group(1))
    return _format_error_path(parts)


def _format_error_path(parts: Sequence[Any]) -> str:
    return "".join(f"[{part}]" if isinstance(part, int) else f".{part}" for part in parts)
