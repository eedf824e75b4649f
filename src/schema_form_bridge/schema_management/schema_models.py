"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

WILDCARD_SEGMENT = "$"
PATH_SEPARATOR = "."


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed root JSON Schema document."""

    root: Mapping[str, Any]
    source_path: Path | None = None


@dataclass(frozen=True)
class FlattenedField:
    """One addressable field path with its resolved definition."""

    path: str
    definition: Mapping[str, Any]
