"""CLI smoke tests."""

from click.testing import CliRunner
from mapping_inspector.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "inspect" in result.output
    assert "check-fields" in result.output
    assert "export-fields" in result.output
    assert "--verbose" in result.output
