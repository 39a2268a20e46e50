"""Import use case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from ado_case_importer.import_execution import (
    ImportExecutionError,
    ImportRequest,
    check_import_format,
    execute_test_case_import,
)
from openpyxl import load_workbook

_EXPORT = (
    "ID,Work Item Type,Title,Test Step,Step Action,Step Expected,Priority\n"
    "201,Test Case,Login,,,,2\n"
    ",,,2,Submit,Dashboard shown,\n"
    ",,,1,Enter user,Field filled,\n"
)


def _write_export(tmp_path: Path, text: str = _EXPORT) -> Path:
    path = tmp_path / "ado-export.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_import_writes_json_next_to_input_by_default(tmp_path: Path) -> None:
    input_path = _write_export(tmp_path)

    outcome = execute_test_case_import(ImportRequest(input_path=str(input_path)))

    assert outcome.output_format == "json"
    assert outcome.output_path.parent == tmp_path.resolve()
    assert outcome.output_path.name.startswith("ado-export-import-")
    assert outcome.output_path.suffix == ".json"
    assert outcome.test_case_count == 1
    document = json.loads(outcome.output_path.read_text(encoding="utf-8"))
    steps = document["testCases"][0]["steps"]
    assert [step["action"] for step in steps] == ["Enter user", "Submit"]
    assert document["testCases"][0]["priority"] == "2"


def test_import_uses_configuration(tmp_path: Path) -> None:
    input_path = _write_export(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "recovery:\n  normalize_priority: true\noutput:\n  format: xlsx\n", encoding="utf-8"
    )
    output_path = tmp_path / "out" / "cases.xlsx"

    outcome = execute_test_case_import(
        ImportRequest(
            input_path=str(input_path),
            config_path=str(config_path),
            output_path=str(output_path),
        )
    )

    assert outcome.output_format == "xlsx"
    assert outcome.output_path == output_path.resolve()
    assert outcome.result.test_cases[0].priority == "High"
    assert load_workbook(output_path)["TestCases"].max_row == 4


def test_requested_format_overrides_configuration(tmp_path: Path) -> None:
    input_path = _write_export(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("output:\n  format: xlsx\n", encoding="utf-8")

    outcome = execute_test_case_import(
        ImportRequest(
            input_path=str(input_path),
            config_path=str(config_path),
            output_path=str(tmp_path / "cases.json"),
            output_format="JSON",
        )
    )

    assert outcome.output_format == "json"
    assert json.loads(outcome.output_path.read_text(encoding="utf-8"))["testCases"]


def test_export_without_data_rows_fails_without_output(tmp_path: Path) -> None:
    input_path = _write_export(tmp_path, "ID,Title,Test Step\n")
    output_path = tmp_path / "cases.json"

    with pytest.raises(ImportExecutionError, match="does not contain any rows"):
        execute_test_case_import(
            ImportRequest(input_path=str(input_path), output_path=str(output_path))
        )
    assert not output_path.exists()


def test_read_and_configuration_errors_are_wrapped(tmp_path: Path) -> None:
    with pytest.raises(ImportExecutionError, match="Import file not found"):
        execute_test_case_import(ImportRequest(input_path=str(tmp_path / "missing.csv")))

    input_path = _write_export(tmp_path)
    with pytest.raises(ImportExecutionError, match="Configuration file not found"):
        execute_test_case_import(
            ImportRequest(input_path=str(input_path), config_path=str(tmp_path / "none.yaml"))
        )


def test_unknown_output_format_is_rejected(tmp_path: Path) -> None:
    input_path = _write_export(tmp_path)

    with pytest.raises(ImportExecutionError, match="Unsupported output format 'pdf'"):
        execute_test_case_import(ImportRequest(input_path=str(input_path), output_format="pdf"))


def test_check_import_format_reports_columns(tmp_path: Path) -> None:
    input_path = _write_export(tmp_path)

    result = check_import_format(str(input_path))

    assert result.is_valid
    assert result.detected_columns[:3] == ("ID", "Work Item Type", "Title")


def test_check_import_format_reports_empty_file(tmp_path: Path) -> None:
    input_path = _write_export(tmp_path, "")

    result = check_import_format(str(input_path))

    assert not result.is_valid
    assert result.issues == ("File is empty",)
