"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for mapping-inspector.
# Replace every <REQUIRED> placeholder before running inspect, check-fields or export-fields.
# Uncomment optional settings only when you need them.

mapping:
  # Provide either inline mapping JSON text or a mapping file path.
  # The document holds exactly one top-level key whose value defines "properties".
  path: "<REQUIRED>"
  # inline: '{"<root>": {"properties": {}}}'

# parsing:
#   # Leave fields of unsupported types out of the tree instead of keeping them as leaves.
#   drop_unsupported: false

# filter:
#   # Glob patterns over dotted field paths; "*" matches any run of characters.
#   include:
#     - "*"
#   exclude:
#     - "<OPTIONAL>"

# validation:
#   # ignore, warn or strict
#   mode: warn
#   fields:
#     - "<OPTIONAL>"
#   similarity_threshold: 0.5
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
