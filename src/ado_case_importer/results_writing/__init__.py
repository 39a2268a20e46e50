"""Results writing domain exports."""

from .import_report_writer import (
    EXPORT_COLUMNS,
    IMPORT_INFO_SHEET_NAME,
    TEST_CASES_SHEET_NAME,
    write_test_cases_json,
    write_test_cases_workbook,
)
from .report_models import ImportMetadata

__all__ = [
    "EXPORT_COLUMNS",
    "IMPORT_INFO_SHEET_NAME",
    "ImportMetadata",
    "TEST_CASES_SHEET_NAME",
    "write_test_cases_json",
    "write_test_cases_workbook",
]
