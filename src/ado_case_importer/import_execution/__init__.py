"""Import execution domain exports."""

from .import_contracts import ImportOutcome, ImportRequest
from .import_use_case import ImportExecutionError, check_import_format, execute_test_case_import

__all__ = [
    "ImportRequest",
    "ImportOutcome",
    "ImportExecutionError",
    "check_import_format",
    "execute_test_case_import",
]
