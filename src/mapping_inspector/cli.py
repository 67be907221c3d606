"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from mapping_inspector.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from mapping_inspector.field_filtering import InvalidPatternError, filter_fields
from mapping_inspector.field_model import Field, iter_field_paths
from mapping_inspector.field_validation import FieldPresenceError, validate_field_presence
from mapping_inspector.inventory_export import write_inventory_workbook


_PACKAGE_LOGGER = "mapping_inspector"


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
_FILTERED_OPTION = click.option(
    "--filtered",
    is_flag=True,
    default=False,
    help="Apply the configured include/exclude patterns first.",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="mapping-inspector")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Mapping field inspection utility."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # level lives on the package logger; a pre-configured root keeps its handlers
    logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="inspect")
@_CONFIG_OPTION
@_FILTERED_OPTION
def inspect(config_path: str, filtered: bool) -> None:
    """Print every field path of the configured mapping with its kind."""
    _, root = _load_tree(config_path, filtered=filtered)
    for entry in iter_field_paths(root):
        click.echo(f"{entry.path}\t{entry.field.kind.value}")


@cli.command(name="check-fields")
@_CONFIG_OPTION
@click.option(
    "--field",
    "extra_fields",
    multiple=True,
    help="Additional dotted field path to check; may be repeated.",
)
def check_fields(config_path: str, extra_fields: tuple[str, ...]) -> None:
    """Report likely typos among the configured and given field paths."""
    configuration, root = _load_tree(config_path, filtered=False)
    requested = list(configuration.validation.fields) + list(extra_fields)
    try:
        report = validate_field_presence(
            requested,
            root,
            configuration.validation.mode,
            threshold=configuration.validation.similarity_threshold,
        )
    except FieldPresenceError as exc:
        raise CliError(str(exc)) from exc

    if report is None:
        click.echo("no corrections")
        return
    for correction in report.corrections:
        click.echo(f"{correction.original} -> {correction.suggestion}")


@cli.command(name="export-fields")
@_CONFIG_OPTION
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the field inventory workbook to write",
)
@_FILTERED_OPTION
def export_fields(config_path: str, output_path: str, filtered: bool) -> None:
    """Write a field inventory workbook for the configured mapping."""
    configuration, root = _load_tree(config_path, filtered=filtered)
    try:
        destination = write_inventory_workbook(configuration.mapping, root, output_path)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination))


def _load_tree(config_path: str, *, filtered: bool) -> tuple[Configuration, Field]:
    try:
        configuration = load_configuration(config_path)
        root = configuration.field_tree
        if filtered:
            root = filter_fields(
                root, configuration.filter.include, configuration.filter.exclude
            )
    except (ConfigurationError, InvalidPatternError) as exc:
        raise CliError(str(exc)) from exc
    return configuration, root


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
