"""Excel field catalog export service."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from schema_form_bridge.configuration.runtime_settings import SchemaConfig
from schema_form_bridge.form_bridge.schema_bridge import SchemaBridge
from schema_form_bridge.form_bridge.type_mapping import UnrepresentableTypeError
from schema_form_bridge.schema_management.schema_models import FlattenedField

from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME, FORM_COLUMNS, SCHEMA_SHEET_NAME


def generate_catalog_workbook(
    bridge: SchemaBridge,
    schema_config: SchemaConfig,
    output_path: Path | str,
) -> list[FlattenedField]:
    """Write one row per addressable field with its derived form properties.

    Returns the exported fields in row order.
    """
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = FIELDS_SHEET_NAME

    all_columns = FIELD_COLUMNS + FORM_COLUMNS
    _write_group_headers(sheet, len(FIELD_COLUMNS), len(FORM_COLUMNS))
    for column_index, name in enumerate(all_columns, start=1):
        sheet.cell(row=2, column=column_index, value=name)

    fields = bridge.get_flattened_fields()
    for row_index, field in enumerate(fields, start=3):
        for column_index, value in enumerate(_field_row(bridge, field), start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    path_width = max([len(FIELD_COLUMNS[0])] + [len(field.path) for field in fields])
    for column_index, name in enumerate(all_columns, start=1):
        width = path_width if column_index == 1 else len(name)
        sheet.column_dimensions[get_column_letter(column_index)].width = max(12, min(width + 6, 60))

    _write_schema_sheet(workbook, schema_config)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return fields


def _field_row(bridge: SchemaBridge, field: FlattenedField) -> tuple[Any, ...]:
    try:
        type_name: str | None = bridge.get_type(field.path).value
    except UnrepresentableTypeError:
        type_name = None
    props = bridge.get_props(field.path)
    allowed_values = props.get("allowed_values")
    return (
        field.path,
        type_name,
        props["label"],
        props["required"],
        _cell_value(field.definition.get("default")),
        ", ".join(str(value) for value in allowed_values) if allowed_values else None,
    )


def _cell_value(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return json.dumps(value, ensure_ascii=False)


def _write_group_headers(sheet: Worksheet, field_count: int, form_count: int) -> None:
    groups = [
        ("Field", 1, field_count),
        ("Form", field_count + 1, form_count),
    ]
    for label, start_column, count in groups:
        if count <= 0:
            continue
        end_column = start_column + count - 1
        start_letter = get_column_letter(start_column)
        end_letter = get_column_letter(end_column)
        sheet.merge_cells(f"{start_letter}1:{end_letter}1")
        sheet[f"{start_letter}1"].value = label
        sheet[f"{start_letter}1"].style = "Headline 1"


def _write_schema_sheet(workbook: Workbook, schema_config: SchemaConfig) -> None:
    sheet = workbook.create_sheet(SCHEMA_SHEET_NAME)
    schema_hash = hashlib.sha256(schema_config.text.encode("utf-8")).hexdigest()
    entries: Sequence[tuple[str, str]] = [
        ("schema_hash", schema_hash),
        ("schema_text", schema_config.text),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
