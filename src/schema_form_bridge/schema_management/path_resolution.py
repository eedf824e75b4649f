"""Dotted field path navigation through a resolved schema tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_models import PATH_SEPARATOR, WILDCARD_SEGMENT
from .schema_resolution import SchemaResolver


class FieldNotFoundError(LookupError):
    """Raised when a field path does not exist in the schema."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Field not found: '{path}' ({reason})")
        self.path = path


def split_path(path: str | None) -> list[str]:
    """Split a dotted field path; empty and None paths denote the root."""
    if not path:
        return []
    return path.split(PATH_SEPARATOR)


def join_path(*segments: str) -> str:
    """Join path segments, skipping empty ones."""
    return PATH_SEPARATOR.join(segment for segment in segments if segment)


def is_index_segment(segment: str) -> bool:
    """Return True for non-negative integer segments."""
    return segment.isascii() and segment.isdigit()


def to_error_path(path: str | None) -> str:
    """Return the validator form of a field path (`friends.0.name` -> `.friends[0].name`)."""
    return "".join(
        f"[{segment}]" if is_index_segment(segment) else f".{segment}"
        for segment in split_path(path)
    )


def declared_types(node: Mapping[str, Any]) -> tuple[str, ...]:
    """Return declared JSON types, dropping `null` from type lists."""
    node_type = node.get("type")
    if isinstance(node_type, list):
        filtered = [value for value in node_type if isinstance(value, str) and value != "null"]
        return tuple(filtered) if filtered else ("null",)
    if isinstance(node_type, str):
        return (node_type,)
    return ()


def is_object_node(node: Mapping[str, Any]) -> bool:
    return "object" in declared_types(node) or "properties" in node


def is_array_node(node: Mapping[str, Any]) -> bool:
    return "array" in declared_types(node) or "items" in node


class PathResolver:
    """Resolve field paths and list child fields against a root schema."""

    def __init__(self, resolver: SchemaResolver) -> None:
        self._resolver = resolver
        self._root = resolver.resolve(resolver.root)

    @property
    def resolver(self) -> SchemaResolver:
        return self._resolver

    @property
    def root(self) -> Mapping[str, Any]:
        """Return the fully resolved root schema."""
        return self._root

    def get_field(self, path: str | None = None) -> Mapping[str, Any]:
        """Return the resolved schema node addressed by `path`."""
        node = self._root
        walked: list[str] = []
        for segment in split_path(path):
            walked.append(segment)
            child = _child_schema(node, segment, PATH_SEPARATOR.join(walked))
            node = self._resolver.resolve(child)
        return node

    def get_parent(self, path: str | None) -> Mapping[str, Any] | None:
        """Return the resolved parent of `path`, or None for the root."""
        segments = split_path(path)
        if not segments:
            return None
        return self.get_field(join_path(*segments[:-1]))

    def get_sub_fields(self, path: str | None = None) -> list[str]:
        """Return child field names of an object or array-of-object field.

        Tuple arrays list the union of their positions' property names in
        first-seen order.
        """
        node = self.get_field(path)
        if is_object_node(node):
            return list(_properties(node))
        if not is_array_node(node):
            return []

        items = node.get("items")
        if isinstance(items, Mapping):
            item_nodes: list[Any] = [items]
        elif isinstance(items, list):
            item_nodes = items
        else:
            item_nodes = []

        names: list[str] = []
        for item in item_nodes:
            resolved = self._resolver.resolve(item)
            if not is_object_node(resolved):
                continue
            for name in _properties(resolved):
                if name not in names:
                    names.append(name)
        return names


def _properties(node: Mapping[str, Any]) -> Mapping[str, Any]:
    properties = node.get("properties")
    return properties if isinstance(properties, Mapping) else {}


def _child_schema(node: Mapping[str, Any], segment: str, path: str) -> Any:
    if is_object_node(node):
        properties = _properties(node)
        if segment in properties:
            return properties[segment]

    if is_array_node(node):
        items = node.get("items")
        if segment == WILDCARD_SEGMENT:
            if isinstance(items, Mapping):
                return items
            raise FieldNotFoundError(path, "wildcard requires a single items schema")
        if is_index_segment(segment):
            if isinstance(items, Mapping):
                return items
            if isinstance(items, list):
                index = int(segment)
                if index < len(items):
                    return items[index]
                raise FieldNotFoundError(path, f"tuple index {index} out of range")

    raise FieldNotFoundError(path, f"no schema for segment '{segment}'")
