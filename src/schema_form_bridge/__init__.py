"""Path-addressable JSON Schema query layer for form rendering."""

import logging

from .form_bridge import LogicalType, SchemaBridge, UnrepresentableTypeError
from .schema_management import FieldNotFoundError, SchemaError
from .validation import ValidationFailure

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FieldNotFoundError",
    "LogicalType",
    "SchemaBridge",
    "SchemaError",
    "UnrepresentableTypeError",
    "ValidationFailure",
]
