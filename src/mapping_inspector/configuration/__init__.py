"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, build_field_tree, load_configuration
from .runtime_settings import (
    Configuration,
    FilterSettings,
    MappingSource,
    ParsingSettings,
    ValidationSettings,
)

__all__ = [
    "Configuration",
    "FilterSettings",
    "MappingSource",
    "ParsingSettings",
    "ValidationSettings",
    "ConfigurationError",
    "build_field_tree",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
