"""Shared catalog export constants."""

from __future__ import annotations

FIELDS_SHEET_NAME = "Fields"
SCHEMA_SHEET_NAME = "Schema"

FIELD_COLUMNS: tuple[str, ...] = ("Path", "Type")
FORM_COLUMNS: tuple[str, ...] = ("Label", "Required", "Default", "Allowed values")
