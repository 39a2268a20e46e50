"""Export of recovered test cases for the persistence layer."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ado_case_importer.structure_recovery import RecoveredStep, RecoveredTestCase

from .report_models import ImportMetadata

TEST_CASES_SHEET_NAME = "TestCases"
IMPORT_INFO_SHEET_NAME = "ImportInfo"

EXPORT_COLUMNS: tuple[str, ...] = (
    "ID",
    "Work Item Type",
    "Title",
    "Test Step",
    "Step Action",
    "Step Expected",
    "Priority",
    "State",
    "Assigned To",
    "Area Path",
    "Scenario Type",
    "Description",
)


def write_test_cases_json(
    test_cases: Sequence[RecoveredTestCase],
    metadata: ImportMetadata,
    output_path: Path | str,
) -> None:
    """Write recovered test cases and import metadata as one JSON document."""
    document = {
        "import": _metadata_document(metadata),
        "testCases": [_test_case_document(test_case) for test_case in test_cases],
    }
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(document, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def write_test_cases_workbook(
    test_cases: Sequence[RecoveredTestCase],
    metadata: ImportMetadata,
    output_path: Path | str,
) -> None:
    """Write recovered test cases in ADO layout plus an ImportInfo sheet."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = TEST_CASES_SHEET_NAME

    _write_header(sheet)
    row_number = 2
    for test_case in test_cases:
        _write_row(sheet, row_number, _header_row_values(test_case))
        row_number += 1
        for step in test_case.steps:
            _write_row(sheet, row_number, _step_row_values(step))
            row_number += 1

    _write_import_info_sheet(workbook, metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)


def _write_header(sheet) -> None:
    for column_index, name in enumerate(EXPORT_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name)
        sheet.cell(row=1, column=column_index).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )
    sheet.freeze_panes = "A2"


def _write_row(sheet, row_number: int, values: dict[str, Any]) -> None:
    for column_index, name in enumerate(EXPORT_COLUMNS, start=1):
        value = values.get(name)
        if value not in (None, ""):
            sheet.cell(row=row_number, column=column_index, value=value)


def _header_row_values(test_case: RecoveredTestCase) -> dict[str, Any]:
    return {
        "ID": test_case.external_id,
        "Work Item Type": test_case.work_item_type,
        "Title": test_case.title,
        "Priority": test_case.priority,
        "State": test_case.state,
        "Assigned To": test_case.assigned_to,
        "Area Path": test_case.area_path,
        "Scenario Type": test_case.scenario_type,
        "Description": test_case.description,
    }


def _step_row_values(step: RecoveredStep) -> dict[str, Any]:
    return {
        "Test Step": step.step_number,
        "Step Action": step.action,
        "Step Expected": step.expected_result,
    }


def _write_import_info_sheet(workbook: Workbook, metadata: ImportMetadata) -> None:
    sheet = workbook.create_sheet(IMPORT_INFO_SHEET_NAME)
    entries = (
        ("import_start", metadata.import_start.isoformat()),
        ("input_path", str(metadata.input_path)),
        ("output_path", str(metadata.output_path)),
        ("rows", metadata.row_count),
        ("test_cases", metadata.test_case_count),
        ("steps", metadata.step_count),
        ("orphan_step_rows", _format_row_numbers(metadata.orphan_step_rows)),
        ("skipped_rows", _format_row_numbers(metadata.skipped_rows)),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _format_row_numbers(row_numbers: Sequence[int]) -> str:
    return ", ".join(str(number) for number in row_numbers)


def _metadata_document(metadata: ImportMetadata) -> dict[str, Any]:
    return {
        "importStart": metadata.import_start.isoformat(),
        "inputPath": str(metadata.input_path),
        "outputPath": str(metadata.output_path),
        "rowCount": metadata.row_count,
        "testCaseCount": metadata.test_case_count,
        "stepCount": metadata.step_count,
        "orphanStepRows": list(metadata.orphan_step_rows),
        "skippedRows": list(metadata.skipped_rows),
    }


def _test_case_document(test_case: RecoveredTestCase) -> dict[str, Any]:
    return {
        "externalId": test_case.external_id,
        "title": test_case.title,
        "description": test_case.description,
        "steps": [
            {
                "stepNumber": step.step_number,
                "action": step.action,
                "expectedResult": step.expected_result,
            }
            for step in test_case.steps
        ],
        "priority": test_case.priority,
        "assignedTo": test_case.assigned_to,
        "areaPath": test_case.area_path,
        "scenarioType": test_case.scenario_type,
        "state": test_case.state,
        "workItemType": test_case.work_item_type,
    }
