"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from mapping_inspector.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Configuration template for mapping-inspector" in scaffold
    assert "mapping:" in scaffold
    assert "# parsing:" in scaffold
    assert "# filter:" in scaffold
    assert "# validation:" in scaffold
    assert "drop_unsupported" in scaffold
    assert "similarity_threshold" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold


def test_placeholder_configuration_is_valid_yaml() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert parsed == {"mapping": {"path": "<REQUIRED>"}}


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
