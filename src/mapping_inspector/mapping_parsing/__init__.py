"""Mapping parsing exports."""

from .mapping_parser import (
    MalformedMappingError,
    MappingError,
    load_mapping_document,
    parse_mapping,
)

__all__ = [
    "MalformedMappingError",
    "MappingError",
    "load_mapping_document",
    "parse_mapping",
]
