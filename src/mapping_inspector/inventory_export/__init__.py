"""Inventory export exports."""

from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME, MAPPING_SHEET_NAME
from .inventory_workbook_builder import write_inventory_workbook

__all__ = [
    "FIELDS_SHEET_NAME",
    "MAPPING_SHEET_NAME",
    "FIELD_COLUMNS",
    "write_inventory_workbook",
]
