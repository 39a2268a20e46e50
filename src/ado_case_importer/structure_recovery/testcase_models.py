"""Structure recovery entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecoveredStep:
    """One ordered step of a recovered test case."""

    step_number: int
    action: str
    expected_result: str


@dataclass(frozen=True)
class RecoveredTestCase:  # pylint: disable=too-many-instance-attributes
    """Test case rebuilt from a header row and the step rows that follow it."""

    external_id: str
    title: str
    description: str
    steps: tuple[RecoveredStep, ...]
    priority: str
    assigned_to: str
    area_path: str
    scenario_type: str
    state: str
    work_item_type: str


@dataclass(frozen=True)
class RecoveryDiagnostics:
    """Data-row numbers (1-based) that needed a fallback rule during recovery."""

    blank_rows: tuple[int, ...]
    unclassified_rows: tuple[int, ...]
    orphan_step_rows: tuple[int, ...]

    @property
    def skipped_rows(self) -> tuple[int, ...]:
        return tuple(sorted(self.blank_rows + self.unclassified_rows))


@dataclass(frozen=True)
class RecoveryResult:
    """Recovered test cases together with recovery diagnostics."""

    row_count: int
    test_cases: tuple[RecoveredTestCase, ...]
    diagnostics: RecoveryDiagnostics

    @property
    def step_count(self) -> int:
        return sum(len(test_case.steps) for test_case in self.test_cases)
