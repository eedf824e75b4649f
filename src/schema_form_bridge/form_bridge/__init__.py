"""Form bridge query exports."""

from .bridge_models import LogicalType
from .error_mapping import collect_error_messages, find_error, find_error_message
from .field_props import FieldOptions, OptionsKind, derive_title, parse_options
from .schema_bridge import SchemaBridge
from .type_mapping import UnrepresentableTypeError

__all__ = [
    "FieldOptions",
    "LogicalType",
    "OptionsKind",
    "SchemaBridge",
    "UnrepresentableTypeError",
    "collect_error_messages",
    "derive_title",
    "find_error",
    "find_error_message",
    "parse_options",
]
