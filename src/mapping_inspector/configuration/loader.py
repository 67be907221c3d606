"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from mapping_inspector.field_filtering import InvalidPatternError, compile_patterns
from mapping_inspector.field_model import Field
from mapping_inspector.field_validation import ValidationMode
from mapping_inspector.mapping_parsing import MappingError, load_mapping_document, parse_mapping
from mapping_inspector.typo_detection import DEFAULT_SIMILARITY_THRESHOLD

from .runtime_settings import (
    Configuration,
    FilterSettings,
    MappingSource,
    ParsingSettings,
    ValidationSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    mapping = _parse_mapping_section(parsed.get("mapping"), path.parent)
    parsing = _parse_parsing_section(parsed.get("parsing"))
    field_tree = build_field_tree(mapping, parsing)

    return Configuration(
        path=path,
        mapping=mapping,
        parsing=parsing,
        filter=_parse_filter_section(parsed.get("filter")),
        validation=_parse_validation_section(parsed.get("validation")),
        field_tree=field_tree,
    )


def build_field_tree(mapping: MappingSource, parsing: ParsingSettings) -> Field:
    """Parse the configured mapping document into its field tree."""
    try:
        document = load_mapping_document(mapping.text)
        return parse_mapping(document, drop_unsupported=parsing.drop_unsupported)
    except MappingError as exc:
        raise ConfigurationError(str(exc)) from exc


def _parse_mapping_section(value: Any, base_path: Path) -> MappingSource:
    section = _require_mapping(value, "mapping")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Mapping definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("mapping.inline must be a string.")
        return MappingSource(text=inline, source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("mapping.path must be a string.")
        mapping_path = _resolve_path(base_path, path_value)
        if not mapping_path.exists():
            raise ConfigurationError(f"Mapping file not found: {mapping_path}")
        text = mapping_path.read_text(encoding="utf-8")
        return MappingSource(text=text, source_path=mapping_path)
    raise ConfigurationError("Mapping definition requires either inline or path.")


def _parse_parsing_section(value: Any) -> ParsingSettings:
    section = _optional_mapping(value, "parsing")
    drop_unsupported = section.get("drop_unsupported", False)
    if not isinstance(drop_unsupported, bool):
        raise ConfigurationError("parsing.drop_unsupported must be a boolean.")
    return ParsingSettings(drop_unsupported=drop_unsupported)


def _parse_filter_section(value: Any) -> FilterSettings:
    section = _optional_mapping(value, "filter")
    include = _normalize_string_sequence(section.get("include"), "filter.include")
    exclude = _normalize_string_sequence(section.get("exclude"), "filter.exclude")
    try:
        compile_patterns(include + exclude)
    except InvalidPatternError as exc:
        raise ConfigurationError(str(exc)) from exc
    return FilterSettings(include=include, exclude=exclude)


def _parse_validation_section(value: Any) -> ValidationSettings:
    section = _optional_mapping(value, "validation")
    mode_raw = section.get("mode", ValidationMode.WARN.value)
    if not isinstance(mode_raw, str):
        raise ConfigurationError("validation.mode must be a string.")
    try:
        mode = ValidationMode.parse(mode_raw)
    except ValueError as exc:
        raise ConfigurationError(f"validation.mode: {exc}") from exc

    fields = _normalize_string_sequence(section.get("fields"), "validation.fields")
    threshold = _require_threshold(
        section.get("similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD),
        "validation.similarity_threshold",
    )
    return ValidationSettings(mode=mode, fields=fields, similarity_threshold=threshold)


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_threshold(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{field_name} must be a number.")
    if not 0 < value <= 1:
        raise ConfigurationError(f"{field_name} must be greater than 0 and at most 1.")
    return float(value)
