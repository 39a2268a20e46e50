"""Pre-flight check of the columns found in an ADO export."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ado_case_importer.column_resolution import (
    DEFAULT_COLUMN_ALIASES,
    ColumnAliases,
    has_column,
)


@dataclass(frozen=True)
class FormatValidationResult:
    """Outcome of checking an export's columns before import."""

    is_valid: bool
    issues: tuple[str, ...]
    warnings: tuple[str, ...]
    detected_columns: tuple[str, ...]


def validate_ado_format(
    rows: Sequence[Mapping[str, object]],
    column_aliases: ColumnAliases | None = None,
) -> FormatValidationResult:
    """Check that the export has a title column and report missing step columns."""
    aliases = column_aliases or DEFAULT_COLUMN_ALIASES
    if not rows:
        return FormatValidationResult(
            is_valid=False,
            issues=("File is empty",),
            warnings=(),
            detected_columns=(),
        )

    detected_columns = tuple(str(column) for column in rows[0].keys())
    issues: list[str] = []
    warnings: list[str] = []

    if not has_column(detected_columns, aliases.title):
        issues.append(f"No 'Title' column found (accepted names: {_join(aliases.title)})")
    if not has_column(detected_columns, aliases.step_number):
        warnings.append(
            f"No step number column found ({_join(aliases.step_number)}); "
            "steps will be numbered by position"
        )
    if not has_column(detected_columns, aliases.step_action):
        warnings.append(f"No step action column found ({_join(aliases.step_action)})")
    if not has_column(detected_columns, aliases.step_expected):
        warnings.append(f"No step expected column found ({_join(aliases.step_expected)})")

    return FormatValidationResult(
        is_valid=not issues,
        issues=tuple(issues),
        warnings=tuple(warnings),
        detected_columns=detected_columns,
    )


def _join(aliases: Sequence[str]) -> str:
    return ", ".join(aliases)
