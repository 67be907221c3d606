"""Excel field inventory export service."""

from __future__ import annotations

import hashlib
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from mapping_inspector.configuration.runtime_settings import MappingSource
from mapping_inspector.field_model import Field, iter_field_paths

from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME, MAPPING_SHEET_NAME


def write_inventory_workbook(source: MappingSource, root: Field, output_path: Path | str) -> Path:
    """Write one row per field of ``root`` plus a sheet identifying the mapping."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = FIELDS_SHEET_NAME

    for column_index, name in enumerate(FIELD_COLUMNS, start=1):
        header = sheet.cell(row=1, column=column_index, value=name)
        header.style = "Headline 3"

    widest_path = len(FIELD_COLUMNS[0])
    for row_index, entry in enumerate(iter_field_paths(root), start=2):
        sheet.cell(row=row_index, column=1, value=entry.path)
        sheet.cell(row=row_index, column=2, value=entry.field.kind.value)
        sheet.cell(row=row_index, column=3, value=entry.depth)
        widest_path = max(widest_path, len(entry.path))

    sheet.column_dimensions[get_column_letter(1)].width = max(12, min(widest_path + 4, 60))
    sheet.column_dimensions[get_column_letter(2)].width = 14
    sheet.freeze_panes = "A2"

    _write_mapping_sheet(workbook, source, root)

    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(destination)
    return destination.resolve()


def _write_mapping_sheet(workbook: Workbook, source: MappingSource, root: Field) -> None:
    sheet = workbook.create_sheet(MAPPING_SHEET_NAME)
    mapping_hash = hashlib.sha256(source.text.encode("utf-8")).hexdigest()
    entries = [
        ("root_name", root.name),
        ("mapping_hash", mapping_hash),
        ("mapping_source", str(source.source_path) if source.source_path else "inline"),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
