"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from ado_case_importer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    OUTPUT_FORMATS,
    write_placeholder_configuration,
)
from ado_case_importer.import_execution import (
    ImportExecutionError,
    ImportRequest,
    check_import_format,
    execute_test_case_import,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="ado-case-importer")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log per-row details.")
def cli(verbose: bool) -> None:
    """Import Azure DevOps test-case exports into structured test cases."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML import configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML import configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="import")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the ADO export (.csv or .xlsx)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON import configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path of the file to write; defaults to a timestamped file next to the input",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    help="Export format; overrides output.format from the configuration",
)
@click.option(
    "--sheet",
    "sheet_name",
    required=False,
    help="Worksheet to read from an Excel export (default: first sheet)",
)
def import_test_cases(
    input_path: str,
    config_path: str | None,
    output_path: str | None,
    output_format: str | None,
    sheet_name: str | None,
) -> None:
    """Recover test cases and their steps from an ADO export."""
    try:
        outcome = execute_test_case_import(
            ImportRequest(
                input_path=input_path,
                config_path=config_path,
                output_path=output_path,
                output_format=output_format,
                sheet_name=sheet_name,
            )
        )
    except ImportExecutionError as exc:
        raise CliError(str(exc)) from exc
    diagnostics = outcome.result.diagnostics
    click.echo(str(outcome.output_path))
    click.echo(
        f"{outcome.test_case_count} test cases, {outcome.result.step_count} steps "
        f"({len(diagnostics.orphan_step_rows)} orphan step rows, "
        f"{len(diagnostics.skipped_rows)} skipped rows)"
    )


@cli.command(name="validate")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the ADO export (.csv or .xlsx)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON import configuration file",
)
@click.option(
    "--sheet",
    "sheet_name",
    required=False,
    help="Worksheet to read from an Excel export (default: first sheet)",
)
def validate(input_path: str, config_path: str | None, sheet_name: str | None) -> None:
    """Check the columns of an ADO export before importing it."""
    try:
        result = check_import_format(input_path, config_path, sheet_name)
    except ImportExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"columns: {', '.join(result.detected_columns)}")
    for warning in result.warnings:
        click.echo(f"warning: {warning}")
    for issue in result.issues:
        click.echo(f"issue: {issue}", err=True)
    if not result.is_valid:
        raise CliError("Export format is not valid.")
    click.echo("format OK")


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
