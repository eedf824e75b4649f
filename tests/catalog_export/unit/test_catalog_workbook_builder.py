"""Field catalog export tests."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

from openpyxl import load_workbook
from schema_form_bridge.catalog_export import (
    FIELDS_SHEET_NAME,
    SCHEMA_SHEET_NAME,
    generate_catalog_workbook,
)
from schema_form_bridge.configuration.runtime_settings import SchemaConfig
from schema_form_bridge.form_bridge.schema_bridge import SchemaBridge
from schema_form_bridge.schema_management import load_schema_document


def _build_schema_config() -> SchemaConfig:
    schema_text = json.dumps(
        {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "tags": {"type": "array", "items": {"type": "string"}, "default": ["new"]},
                "plan": {"type": "string", "enum": ["free", "pro"], "default": "free"},
                "nothing": {"type": "null"},
            },
            "required": ["name"],
        }
    )
    return SchemaConfig(text=schema_text, source_path=None)


def _export(tmp_path: Path) -> tuple[Path, list[str]]:
    schema_config = _build_schema_config()
    bridge = SchemaBridge(load_schema_document(schema_config).root)
    output_path = tmp_path / "nested" / "catalog.xlsx"

    fields = generate_catalog_workbook(bridge, schema_config, output_path)

    return output_path, [field.path for field in fields]


def test_catalog_contains_group_headers_and_columns(tmp_path: Path) -> None:
    output_path, _ = _export(tmp_path)

    assert output_path.exists()
    sheet = load_workbook(output_path)[FIELDS_SHEET_NAME]

    merged_ranges = {str(rng) for rng in sheet.merged_cells.ranges}
    assert merged_ranges == {"A1:B1", "C1:F1"}
    assert sheet["A1"].value == "Field"
    assert sheet["C1"].value == "Form"
    assert [cell.value for cell in sheet[2]] == [
        "Path",
        "Type",
        "Label",
        "Required",
        "Default",
        "Allowed values",
    ]


def test_catalog_rows_describe_each_field(tmp_path: Path) -> None:
    output_path, paths = _export(tmp_path)
    sheet = load_workbook(output_path)[FIELDS_SHEET_NAME]

    rows = [tuple(cell.value for cell in row) for row in sheet.iter_rows(min_row=3)]

    assert paths == ["name", "tags", "tags.$", "plan", "nothing"]
    assert rows[2][2] in (None, "")
    assert rows[:2] + rows[3:] == [
        ("name", "text", "Name", True, None, None),
        ("tags", "list", "Tags", False, '["new"]', None),
        ("plan", "text", "Plan", False, "free", "free, pro"),
        ("nothing", None, "Nothing", False, None, None),
    ]


def test_schema_sheet_contains_hash_and_text(tmp_path: Path) -> None:
    schema_config = _build_schema_config()
    output_path, _ = _export(tmp_path)
    sheet = load_workbook(output_path)[SCHEMA_SHEET_NAME]

    assert sheet["A1"].value == "schema_hash"
    assert sheet["B1"].value == hashlib.sha256(schema_config.text.encode("utf-8")).hexdigest()
    assert sheet["A2"].value == "schema_text"
    assert sheet["B2"].value == schema_config.text
