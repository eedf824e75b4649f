"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

RemoveAdditional = bool | Literal["all"]


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized schema settings."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class BridgeOptions:
    """Interpretation options forwarded to the validator collaborator."""

    all_errors: bool = True
    use_defaults: bool = False
    remove_additional: RemoveAdditional = False


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaConfig
    options: BridgeOptions
