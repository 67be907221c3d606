"""Field validation exports."""

from .presence_validation import (
    FieldPresenceError,
    ValidationMode,
    format_report,
    validate_field_presence,
)

__all__ = [
    "FieldPresenceError",
    "ValidationMode",
    "format_report",
    "validate_field_presence",
]
