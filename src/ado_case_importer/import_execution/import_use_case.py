"""Import execution use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ado_case_importer.configuration import (
    OUTPUT_FORMATS,
    Configuration,
    ConfigurationError,
    load_configuration,
)
from ado_case_importer.format_validation import FormatValidationResult, validate_ado_format
from ado_case_importer.results_writing import (
    ImportMetadata,
    write_test_cases_json,
    write_test_cases_workbook,
)
from ado_case_importer.row_reading import RowReadError, read_rows
from ado_case_importer.structure_recovery import (
    InvalidInputError,
    recover_test_cases_with_diagnostics,
)

from .import_contracts import ImportOutcome, ImportRequest

_LOGGER = logging.getLogger(__name__)

_OUTPUT_SUFFIXES = {"json": ".json", "xlsx": ".xlsx"}


class ImportExecutionError(Exception):
    """Raised when an import use case cannot be completed."""


def execute_test_case_import(request: ImportRequest) -> ImportOutcome:
    """Read an export file, recover its test cases and write them to the output file."""
    import_start = datetime.now(UTC)
    configuration = _load_configuration(request.config_path)
    output_format = _resolve_output_format(request.output_format, configuration)

    try:
        rows = read_rows(request.input_path, request.sheet_name)
        result = recover_test_cases_with_diagnostics(rows, configuration.recovery)
    except (RowReadError, InvalidInputError) as exc:
        raise ImportExecutionError(str(exc)) from exc

    output_path = _resolve_output_path(request.input_path, request.output_path, output_format)
    metadata = ImportMetadata.from_recovery(
        import_start=import_start,
        input_path=Path(request.input_path).resolve(),
        output_path=output_path.resolve(),
        result=result,
    )
    try:
        if output_format == "xlsx":
            write_test_cases_workbook(result.test_cases, metadata, output_path)
        else:
            write_test_cases_json(result.test_cases, metadata, output_path)
    except OSError as exc:
        raise ImportExecutionError(f"Failed to write {output_path}: {exc}") from exc

    _LOGGER.info("Wrote %d test cases to %s", len(result.test_cases), output_path)
    return ImportOutcome(
        output_path=output_path.resolve(),
        output_format=output_format,
        result=result,
    )


def check_import_format(
    input_path: str,
    config_path: str | None = None,
    sheet_name: str | None = None,
) -> FormatValidationResult:
    """Check the columns of an export file without importing it."""
    configuration = _load_configuration(config_path)
    try:
        rows = read_rows(input_path, sheet_name)
    except RowReadError as exc:
        raise ImportExecutionError(str(exc)) from exc
    return validate_ado_format(rows, configuration.recovery.column_aliases)


def _load_configuration(config_path: str | None) -> Configuration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise ImportExecutionError(str(exc)) from exc


def _resolve_output_format(requested: str | None, configuration: Configuration) -> str:
    if requested is None:
        return configuration.output.output_format
    normalized = requested.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise ImportExecutionError(
            f"Unsupported output format '{requested}': expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    return normalized


def _resolve_output_path(input_path: str, output_path: str | None, output_format: str) -> Path:
    if output_path:
        return Path(output_path)
    input_file = Path(input_path)
    timestamp = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
    suffix = _OUTPUT_SUFFIXES[output_format]
    return input_file.parent / f"{input_file.stem}-import-{timestamp}{suffix}"
