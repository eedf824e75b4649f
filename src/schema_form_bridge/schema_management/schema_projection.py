"""Schema loading and flattening service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .path_resolution import PathResolver, is_array_node, is_object_node, join_path
from .schema_models import WILDCARD_SEGMENT, FlattenedField, SchemaDocument
from .schema_resolution import SchemaError

if TYPE_CHECKING:
    from schema_form_bridge.configuration.runtime_settings import SchemaConfig


def load_schema_document(config: SchemaConfig) -> SchemaDocument:
    """Parse schema text into a structured document."""
    try:
        root = json.loads(config.text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema: {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaError("JSON schema root must be an object.")
    return SchemaDocument(root=root, source_path=config.source_path)


def flatten_schema(paths: PathResolver) -> list[FlattenedField]:
    """Return every addressable field in depth-first declaration order.

    Homogeneous arrays contribute a `$` segment, tuple arrays one segment per
    position. Recursive schemas stop at the first re-entry of an ancestor.
    """
    fields: list[FlattenedField] = []
    _flatten_node(paths, prefix="", node=paths.root, fields=fields, ancestors={id(paths.root)})
    return fields


def _flatten_node(
    paths: PathResolver,
    *,
    prefix: str,
    node: Mapping[str, object],
    fields: list[FlattenedField],
    ancestors: set[int],
) -> None:
    for segment in _child_segments(node):
        child_path = join_path(prefix, segment)
        child = paths.get_field(child_path)
        fields.append(FlattenedField(path=child_path, definition=child))
        if id(child) in ancestors:
            continue
        _flatten_node(
            paths,
            prefix=child_path,
            node=child,
            fields=fields,
            ancestors=ancestors | {id(child)},
        )


def _child_segments(node: Mapping[str, object]) -> list[str]:
    if is_object_node(node):
        properties = node.get("properties")
        return list(properties) if isinstance(properties, Mapping) else []
    if is_array_node(node):
        items = node.get("items")
        if isinstance(items, Mapping):
            return [WILDCARD_SEGMENT]
        if isinstance(items, list):
            return [str(index) for index in range(len(items))]
    return []
