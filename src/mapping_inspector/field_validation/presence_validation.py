"""Presence validation of requested fields against a mapping tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from mapping_inspector.field_model import Field
from mapping_inspector.typo_detection import DEFAULT_SIMILARITY_THRESHOLD, TypoReport, find_typos

_LOGGER = logging.getLogger("mapping_inspector.field_validation")


class ValidationMode(str, Enum):
    """How typo findings are surfaced to the caller."""

    IGNORE = "ignore"
    WARN = "warn"
    STRICT = "strict"

    @classmethod
    def parse(cls, value: str) -> ValidationMode:
        normalized = value.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        allowed = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown validation mode '{value}'. Expected one of: {allowed}.")


class FieldPresenceError(Exception):
    """Raised in strict mode when requested fields look like typos."""

    def __init__(self, report: TypoReport) -> None:
        super().__init__(format_report(report))
        self.report = report


def format_report(report: TypoReport) -> str:
    """Render corrections as a single user-facing sentence."""
    originals = ", ".join(report.originals)
    suggestions = ", ".join(report.suggestions)
    return f"Field(s) [{originals}] not found in the mapping; did you mean [{suggestions}]?"


def validate_field_presence(
    requested_paths: Iterable[str],
    root: Field,
    mode: ValidationMode = ValidationMode.WARN,
    *,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> TypoReport | None:
    """Check requested paths and surface likely typos according to ``mode``.

    Returns the typo report (None when there is nothing to correct). In strict
    mode a non-empty report raises FieldPresenceError instead.
    """
    if mode is ValidationMode.IGNORE:
        return None

    report = find_typos(list(requested_paths), root, threshold=threshold)
    if report is None:
        return None

    if mode is ValidationMode.STRICT:
        raise FieldPresenceError(report)
    _LOGGER.warning(format_report(report))
    return report
