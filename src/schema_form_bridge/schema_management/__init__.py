"""Schema management exports."""

from .path_resolution import FieldNotFoundError, PathResolver
from .schema_models import WILDCARD_SEGMENT, FlattenedField, SchemaDocument
from .schema_projection import flatten_schema, load_schema_document
from .schema_resolution import SchemaError, SchemaResolver

__all__ = [
    "FieldNotFoundError",
    "FlattenedField",
    "PathResolver",
    "SchemaDocument",
    "SchemaError",
    "SchemaResolver",
    "WILDCARD_SEGMENT",
    "flatten_schema",
    "load_schema_document",
]
