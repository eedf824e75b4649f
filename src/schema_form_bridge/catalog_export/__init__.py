"""Catalog export exports."""

from .catalog_workbook_builder import generate_catalog_workbook
from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME, FORM_COLUMNS, SCHEMA_SHEET_NAME

__all__ = [
    "FIELDS_SHEET_NAME",
    "SCHEMA_SHEET_NAME",
    "FIELD_COLUMNS",
    "FORM_COLUMNS",
    "generate_catalog_workbook",
]
