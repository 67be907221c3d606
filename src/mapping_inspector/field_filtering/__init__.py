"""Field filtering exports."""

from .field_filter import (
    FieldPattern,
    InvalidPatternError,
    compile_pattern,
    compile_patterns,
    filter_fields,
)

__all__ = [
    "FieldPattern",
    "InvalidPatternError",
    "compile_pattern",
    "compile_patterns",
    "filter_fields",
]
