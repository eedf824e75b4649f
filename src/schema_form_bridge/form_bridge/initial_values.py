"""Initial form value computation."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from schema_form_bridge.schema_management.path_resolution import PathResolver, join_path

from .type_mapping import schema_type_name


def compute_initial_value(paths: PathResolver, path: str, initial_count: int = 0) -> Any:
    """Return the initial value of the field at `path`.

    Arrays hold `initial_count` placeholder elements, each computed from its
    own element path so it resolves through the item schema; tuple positions
    beyond the declared items are None. Objects start
    empty unless they declare a default. Scalars return their default, or
    None when the schema declares none.
    """
    field = paths.get_field(path)
    type_name = schema_type_name(field)

    if type_name == "array":
        if initial_count > 0:
            items = field.get("items")
            # Tuple positions past the declared items have no schema.
            limit = len(items) if isinstance(items, list) else initial_count
            return [
                compute_initial_value(paths, join_path(path, str(index)))
                if index < limit
                else None
                for index in range(initial_count)
            ]
        return deepcopy(field["default"]) if "default" in field else []

    if type_name == "object":
        return deepcopy(field["default"]) if "default" in field else {}

    return field.get("default")
