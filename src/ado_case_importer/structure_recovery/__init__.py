"""Structure recovery exports."""

from .case_recoverer import (
    UNTITLED_TEST_CASE,
    InvalidInputError,
    recover_test_cases,
    recover_test_cases_with_diagnostics,
)
from .recovery_options import DEFAULT_RECOVERY_OPTIONS, RecoveryOptions
from .testcase_models import (
    RecoveredStep,
    RecoveredTestCase,
    RecoveryDiagnostics,
    RecoveryResult,
)

__all__ = [
    "DEFAULT_RECOVERY_OPTIONS",
    "InvalidInputError",
    "RecoveredStep",
    "RecoveredTestCase",
    "RecoveryDiagnostics",
    "RecoveryOptions",
    "RecoveryResult",
    "UNTITLED_TEST_CASE",
    "recover_test_cases",
    "recover_test_cases_with_diagnostics",
]
