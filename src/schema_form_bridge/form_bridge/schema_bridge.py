"""Path-addressable query facade over one JSON Schema document."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schema_form_bridge.configuration.loader import parse_bridge_options
from schema_form_bridge.configuration.runtime_settings import BridgeOptions, Configuration
from schema_form_bridge.schema_management.path_resolution import PathResolver
from schema_form_bridge.schema_management.schema_models import FlattenedField
from schema_form_bridge.schema_management.schema_projection import (
    flatten_schema,
    load_schema_document,
)
from schema_form_bridge.schema_management.schema_resolution import SchemaResolver
from schema_form_bridge.validation.model_validator import ModelValidator

from .bridge_models import LogicalType
from .error_mapping import collect_error_messages, find_error, find_error_message
from .field_props import compute_field_props
from .initial_values import compute_initial_value
from .type_mapping import map_logical_type

_LOGGER = logging.getLogger(__name__)


class SchemaBridge:
    """Answer form-layer queries about the fields of one schema.

    The root schema is resolved once at construction. Every query is a pure
    function of the resolved tree and its arguments; the only shared state is
    the additive resolution memo, so instances can be queried from several
    threads without coordination.

    Options are not consumed by the queries; they configure the validator
    returned by `get_validator`.
    """

    def __init__(
        self,
        schema: Mapping[str, Any],
        options: BridgeOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self._schema = schema
        self._options = parse_bridge_options(options)
        self._paths = PathResolver(SchemaResolver(schema))
        _LOGGER.debug("Schema bridge ready with %d root field(s)", len(self.get_sub_fields()))

    @classmethod
    def from_configuration(cls, configuration: Configuration) -> SchemaBridge:
        """Build a bridge from a loaded configuration file."""
        document = load_schema_document(configuration.schema)
        return cls(document.root, configuration.options)

    @property
    def schema(self) -> Mapping[str, Any]:
        return self._schema

    @property
    def options(self) -> BridgeOptions:
        return self._options

    def get_field(self, path: str | None = None) -> Mapping[str, Any]:
        """Return the resolved schema of the field at `path` (root when empty)."""
        return self._paths.get_field(path)

    def get_sub_fields(self, path: str | None = None) -> list[str]:
        return self._paths.get_sub_fields(path)

    def get_flattened_fields(self) -> list[FlattenedField]:
        """Return every addressable field path in depth-first order."""
        return flatten_schema(self._paths)

    def get_initial_value(self, path: str, initial_count: int = 0) -> Any:
        return compute_initial_value(self._paths, path, initial_count)

    def get_props(self, path: str, props: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return compute_field_props(self._paths, path, props)

    def get_type(self, path: str) -> LogicalType:
        return map_logical_type(path, self._paths.get_field(path))

    def get_error(self, path: str, error: Any = None) -> Any:
        return find_error(path, error)

    def get_error_message(self, path: str, error: Any = None) -> Any:
        return find_error_message(path, error)

    def get_error_messages(self, error: Any = None) -> list[Any]:
        return collect_error_messages(error)

    def get_validator(self) -> ModelValidator:
        """Return a validator for this schema configured with the bridge options."""
        return ModelValidator(self._schema, self._options)
