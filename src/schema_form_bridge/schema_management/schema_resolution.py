"""`$ref` and `allOf` resolution for JSON Schema fragments."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

_LOGGER = logging.getLogger(__name__)

_REF_KEY = "$ref"
_ALL_OF_KEY = "allOf"


class SchemaError(Exception):
    """Raised for malformed or unresolvable schema fragments."""


class SchemaResolver:
    """Dereference schema fragments against one root document.

    Resolved fragments never contain `$ref` or `allOf`. Results are memoized:
    `$ref` targets by pointer string, other composite fragments by identity.
    The memo is additive only, so concurrent callers at worst compute an equal
    result twice.
    """

    def __init__(self, root: Any) -> None:
        if not isinstance(root, Mapping):
            raise SchemaError("JSON schema root must be an object.")
        self._root = root
        self._pointer_cache: dict[str, Mapping[str, Any]] = {}
        self._node_cache: dict[int, tuple[Mapping[str, Any], Mapping[str, Any]]] = {}

    @property
    def root(self) -> Mapping[str, Any]:
        """Return the unresolved root document."""
        return self._root

    def resolve(self, node: Any) -> Mapping[str, Any]:
        """Return `node` with every top-level `$ref` and `allOf` eliminated."""
        return self._resolve(node, visiting=frozenset())

    def resolve_pointer(self, pointer: str) -> Mapping[str, Any]:
        """Resolve a local JSON pointer such as `#/definitions/address`."""
        return self._resolve_pointer(pointer, visiting=frozenset())

    def _resolve(self, node: Any, *, visiting: frozenset[str]) -> Mapping[str, Any]:
        if not isinstance(node, Mapping):
            raise SchemaError(f"JSON schema nodes must be objects, got {type(node).__name__}.")
        if _REF_KEY not in node and _ALL_OF_KEY not in node:
            return node

        cached = self._node_cache.get(id(node))
        if cached is not None and cached[0] is node:
            return cached[1]

        if _REF_KEY in node:
            resolved = self._resolve_reference(node, visiting=visiting)
        else:
            resolved = self._merge_all_of(node, visiting=visiting)
        self._node_cache[id(node)] = (node, resolved)
        return resolved

    def _resolve_reference(
        self, node: Mapping[str, Any], *, visiting: frozenset[str]
    ) -> Mapping[str, Any]:
        pointer = node[_REF_KEY]
        if not isinstance(pointer, str):
            raise SchemaError("$ref values must be strings.")
        target = self._resolve_pointer(pointer, visiting=visiting)
        siblings = {key: value for key, value in node.items() if key != _REF_KEY}
        if not siblings:
            return target
        return self._resolve({**target, **siblings}, visiting=visiting)

    def _resolve_pointer(self, pointer: str, *, visiting: frozenset[str]) -> Mapping[str, Any]:
        cached = self._pointer_cache.get(pointer)
        if cached is not None:
            _LOGGER.debug("Reusing resolved $ref %s", pointer)
            return cached
        if pointer in visiting:
            raise SchemaError(f"Circular $ref detected: {pointer}")

        _LOGGER.debug("Resolving $ref %s", pointer)
        target = self._lookup_pointer(pointer)
        resolved = self._resolve(target, visiting=visiting | {pointer})
        self._pointer_cache[pointer] = resolved
        return resolved

    def _lookup_pointer(self, pointer: str) -> Any:
        if not pointer.startswith("#"):
            raise SchemaError(f"Unsupported $ref target (only local pointers): {pointer}")
        fragment = pointer[1:]
        if fragment and not fragment.startswith("/"):
            raise SchemaError(f"Malformed $ref pointer: {pointer}")

        target: Any = self._root
        for raw_part in fragment.split("/")[1:]:
            part = raw_part.replace("~1", "/").replace("~0", "~")
            if isinstance(target, Mapping) and part in target:
                target = target[part]
            elif isinstance(target, list) and part.isdigit() and int(part) < len(target):
                target = target[int(part)]
            else:
                raise SchemaError(f"$ref target does not exist: {pointer}")
        return target

    def _merge_all_of(
        self, node: Mapping[str, Any], *, visiting: frozenset[str]
    ) -> Mapping[str, Any]:
        members = node[_ALL_OF_KEY]
        if not isinstance(members, Sequence) or isinstance(members, str):
            raise SchemaError("allOf must be a list of schema objects.")

        base = {key: value for key, value in node.items() if key != _ALL_OF_KEY}
        merged: dict[str, Any] = {}
        for fragment in (base, *members):
            _merge_fragment(merged, self._resolve(fragment, visiting=visiting))
        return merged


def _merge_fragment(merged: dict[str, Any], fragment: Mapping[str, Any]) -> None:
    for key, value in fragment.items():
        if key == "properties" and isinstance(value, Mapping):
            properties = dict(merged.get("properties", {}))
            properties.update(value)
            merged["properties"] = properties
        elif key == "required" and isinstance(value, Sequence) and not isinstance(value, str):
            required = list(merged.get("required", []))
            for name in value:
                if name not in required:
                    required.append(name)
            merged["required"] = required
        else:
            merged[key] = value
