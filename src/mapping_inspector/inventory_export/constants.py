"""Shared inventory export constants."""

from __future__ import annotations

FIELDS_SHEET_NAME = "Fields"
MAPPING_SHEET_NAME = "Mapping"

FIELD_COLUMNS: tuple[str, ...] = ("Path", "Kind", "Depth")
