"""Recovery of hierarchical test cases from interleaved ADO export rows."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .priority_normalization import normalize_priority
from .recovery_options import DEFAULT_RECOVERY_OPTIONS, RecoveryOptions
from .row_classification import (
    ResolvedRow,
    RowKind,
    classify_row,
    parse_step_number,
    resolve_row,
    row_is_blank,
)
from .testcase_models import (
    RecoveredStep,
    RecoveredTestCase,
    RecoveryDiagnostics,
    RecoveryResult,
)

_LOGGER = logging.getLogger(__name__)

UNTITLED_TEST_CASE = "Untitled Test Case"

_BACKFILL_FIELDS = ("assigned_to", "area_path", "scenario_type", "state")


class InvalidInputError(Exception):
    """Raised when import data is empty or not a sequence of row mappings."""


@dataclass
class _TestCaseDraft:  # pylint: disable=too-many-instance-attributes
    """Test case under construction while its step rows are scanned."""

    external_id: str
    title: str
    description: str
    priority: str
    assigned_to: str
    area_path: str
    scenario_type: str
    state: str
    work_item_type: str
    steps: list[RecoveredStep] = field(default_factory=list)


@dataclass
class _RecoveryState:
    """Mutable collector for the row scan."""

    completed: list[_TestCaseDraft] = field(default_factory=list)
    current: _TestCaseDraft | None = None
    blank_rows: list[int] = field(default_factory=list)
    unclassified_rows: list[int] = field(default_factory=list)
    orphan_step_rows: list[int] = field(default_factory=list)

    def flush(self) -> None:
        if self.current is not None:
            self.completed.append(self.current)
            self.current = None


def recover_test_cases(
    rows: Sequence[Mapping[str, object]],
    options: RecoveryOptions | None = None,
) -> tuple[RecoveredTestCase, ...]:
    """Rebuild test cases with ordered steps from ADO export rows.

    Raises:
      InvalidInputError: If ``rows`` is empty or not a sequence of mappings.
    """
    return recover_test_cases_with_diagnostics(rows, options).test_cases


def recover_test_cases_with_diagnostics(
    rows: Sequence[Mapping[str, object]],
    options: RecoveryOptions | None = None,
) -> RecoveryResult:
    """Rebuild test cases and report which rows needed a fallback rule.

    Row-level anomalies never raise. Blank and unclassifiable rows are skipped,
    step rows without a preceding header become a synthesized test case.

    Raises:
      InvalidInputError: If ``rows`` is empty or not a sequence of mappings.
    """
    resolved_options = options or DEFAULT_RECOVERY_OPTIONS
    checked_rows = _require_row_sequence(rows)
    _LOGGER.info(
        "Recovering test cases from %d rows with columns %s",
        len(checked_rows),
        list(checked_rows[0].keys()),
    )

    state = _RecoveryState()
    for row_number, row in enumerate(checked_rows, start=1):
        _process_row(row_number, row, resolved_options, state)
    state.flush()

    test_cases = tuple(_finalize(draft, resolved_options) for draft in state.completed)
    diagnostics = RecoveryDiagnostics(
        blank_rows=tuple(state.blank_rows),
        unclassified_rows=tuple(state.unclassified_rows),
        orphan_step_rows=tuple(state.orphan_step_rows),
    )
    result = RecoveryResult(
        row_count=len(checked_rows),
        test_cases=test_cases,
        diagnostics=diagnostics,
    )
    _LOGGER.info(
        "Recovered %d test cases with %d steps (%d orphan step rows, %d skipped rows)",
        len(test_cases),
        result.step_count,
        len(diagnostics.orphan_step_rows),
        len(diagnostics.skipped_rows),
    )
    return result


def _require_row_sequence(rows: object) -> Sequence[Mapping[str, object]]:
    if isinstance(rows, str | bytes | bytearray | Mapping) or not isinstance(rows, Sequence):
        raise InvalidInputError("Import data must be a sequence of row mappings.")
    if not rows:
        raise InvalidInputError("Import data does not contain any rows.")
    for index, row in enumerate(rows, start=1):
        if not isinstance(row, Mapping):
            raise InvalidInputError(f"Row {index} is not a mapping of column names to values.")
    return rows


def _process_row(
    row_number: int,
    row: Mapping[str, object],
    options: RecoveryOptions,
    state: _RecoveryState,
) -> None:
    if row_is_blank(row):
        state.blank_rows.append(row_number)
        return

    resolved = resolve_row(row, options.column_aliases)
    kind = classify_row(resolved)
    _LOGGER.debug("Row %d classified as %s (title=%r)", row_number, kind.value, resolved.title)

    if kind is RowKind.HEADER:
        state.flush()
        state.current = _start_draft(resolved, options)
    elif kind is RowKind.STEP:
        if state.current is None:
            state.current = _start_orphan_draft(resolved, options)
            state.orphan_step_rows.append(row_number)
            _LOGGER.warning(
                "Row %d: step row without a preceding test case, created %r",
                row_number,
                state.current.title,
            )
        else:
            _append_step(state.current, resolved, options)
    else:
        state.unclassified_rows.append(row_number)


def _start_draft(resolved: ResolvedRow, options: RecoveryOptions) -> _TestCaseDraft:
    return _TestCaseDraft(
        external_id=resolved.external_id,
        title=resolved.title,
        description=resolved.description,
        priority=_resolve_priority(resolved.priority, options),
        assigned_to=resolved.assigned_to,
        area_path=resolved.area_path,
        scenario_type=resolved.scenario_type,
        state=resolved.state,
        work_item_type=resolved.work_item_type or options.default_work_item_type,
    )


def _start_orphan_draft(resolved: ResolvedRow, options: RecoveryOptions) -> _TestCaseDraft:
    return _TestCaseDraft(
        external_id=resolved.external_id,
        title=resolved.title or resolved.step_action or UNTITLED_TEST_CASE,
        description="",
        priority=options.default_priority,
        assigned_to=resolved.assigned_to,
        area_path=resolved.area_path,
        scenario_type=resolved.scenario_type,
        state=resolved.state,
        work_item_type=resolved.work_item_type or options.default_work_item_type,
        steps=[
            RecoveredStep(
                step_number=1,
                action=resolved.step_action,
                expected_result=resolved.step_expected,
            )
        ],
    )


def _append_step(draft: _TestCaseDraft, resolved: ResolvedRow, options: RecoveryOptions) -> None:
    step_number = parse_step_number(resolved.step_number)
    if step_number is None:
        step_number = len(draft.steps) + 1
    draft.steps.append(
        RecoveredStep(
            step_number=step_number,
            action=resolved.step_action,
            expected_result=resolved.step_expected,
        )
    )
    if options.backfill_step_metadata:
        _backfill_metadata(draft, resolved)


def _backfill_metadata(draft: _TestCaseDraft, resolved: ResolvedRow) -> None:
    for field_name in _BACKFILL_FIELDS:
        value = getattr(resolved, field_name)
        if value and not getattr(draft, field_name):
            setattr(draft, field_name, value)


def _resolve_priority(value: str, options: RecoveryOptions) -> str:
    if options.normalize_priority:
        return normalize_priority(value, options.default_priority)
    return value or options.default_priority


def _finalize(draft: _TestCaseDraft, options: RecoveryOptions) -> RecoveredTestCase:
    return RecoveredTestCase(
        external_id=draft.external_id,
        title=draft.title,
        description=draft.description,
        steps=tuple(sorted(draft.steps, key=lambda step: step.step_number)),
        priority=draft.priority,
        assigned_to=draft.assigned_to,
        area_path=draft.area_path,
        scenario_type=draft.scenario_type,
        state=draft.state or options.default_state,
        work_item_type=draft.work_item_type,
    )
