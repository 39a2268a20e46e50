"""Field resolution and header/step classification of single export rows."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from ado_case_importer.column_resolution import (
    ColumnAliases,
    is_blank_value,
    resolve_column_value,
)
from ado_case_importer.text_sanitation import sanitize_text

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


class RowKind(str, Enum):
    """Role of a row within an ADO export."""

    HEADER = "header"
    STEP = "step"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class ResolvedRow:  # pylint: disable=too-many-instance-attributes
    """Field values of one row; absent fields are empty strings, no defaults applied."""

    external_id: str
    title: str
    step_number: str
    step_action: str
    step_expected: str
    assigned_to: str
    area_path: str
    scenario_type: str
    priority: str
    description: str
    state: str
    work_item_type: str

    @property
    def has_step_content(self) -> bool:
        return bool(self.step_number or self.step_action or self.step_expected)


def row_is_blank(row: Mapping[object, object]) -> bool:
    return all(is_blank_value(value) for value in row.values())


def resolve_row(row: Mapping[object, object], aliases: ColumnAliases) -> ResolvedRow:
    """Resolve every semantic field of a row, sanitizing the free-text ones."""
    return ResolvedRow(
        external_id=resolve_column_value(row, aliases.external_id),
        title=sanitize_text(resolve_column_value(row, aliases.title)),
        step_number=resolve_column_value(row, aliases.step_number),
        step_action=sanitize_text(resolve_column_value(row, aliases.step_action)),
        step_expected=sanitize_text(resolve_column_value(row, aliases.step_expected)),
        assigned_to=resolve_column_value(row, aliases.assigned_to),
        area_path=resolve_column_value(row, aliases.area_path),
        scenario_type=resolve_column_value(row, aliases.scenario_type),
        priority=resolve_column_value(row, aliases.priority),
        description=sanitize_text(resolve_column_value(row, aliases.description)),
        state=resolve_column_value(row, aliases.state),
        work_item_type=resolve_column_value(row, aliases.work_item_type),
    )


def classify_row(resolved: ResolvedRow) -> RowKind:
    """Header rows carry a title and no step number; step rows carry any step field."""
    if resolved.title and not resolved.step_number:
        return RowKind.HEADER
    if resolved.has_step_content:
        return RowKind.STEP
    return RowKind.UNCLASSIFIED


def parse_step_number(value: str) -> int | None:
    """Read the leading integer of a step number cell; non-positive values count as absent."""
    match = _LEADING_INTEGER.match(value)
    if match is None:
        return None
    number = int(match.group(1))
    return number if number > 0 else None
