"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from mapping_inspector.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["export-fields", "--output", "/tmp/out.xlsx"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["inspect", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_file_is_reported_without_traceback(
    tmp_path: Path, capsys
) -> None:
    exit_code = main(["inspect", "--config", str(tmp_path / "absent.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "config.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert output_path.read_text(encoding="utf-8") == "existing"
