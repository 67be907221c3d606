"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mapping_inspector.field_model import Field
from mapping_inspector.field_validation import ValidationMode


@dataclass(frozen=True)
class MappingSource:
    """Normalized mapping document settings."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class ParsingSettings:
    """Options applied while building the field tree."""

    drop_unsupported: bool


@dataclass(frozen=True)
class FilterSettings:
    """Include and exclude glob patterns over dotted field paths."""

    include: tuple[str, ...]
    exclude: tuple[str, ...]


@dataclass(frozen=True)
class ValidationSettings:
    """Presence validation of the fields a caller intends to use."""

    mode: ValidationMode
    fields: tuple[str, ...]
    similarity_threshold: float


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    mapping: MappingSource
    parsing: ParsingSettings
    filter: FilterSettings
    validation: ValidationSettings
    field_tree: Field
