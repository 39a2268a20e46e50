"""Tunable behavior of the structure recoverer."""

from __future__ import annotations

from dataclasses import dataclass

from ado_case_importer.column_resolution import DEFAULT_COLUMN_ALIASES, ColumnAliases

DEFAULT_PRIORITY = "Medium"
DEFAULT_STATE = "Active"
DEFAULT_WORK_ITEM_TYPE = "Test Case"


@dataclass(frozen=True)
class RecoveryOptions:
    """Alias table, field defaults and optional compatibility rules."""

    column_aliases: ColumnAliases = DEFAULT_COLUMN_ALIASES
    default_priority: str = DEFAULT_PRIORITY
    default_state: str = DEFAULT_STATE
    default_work_item_type: str = DEFAULT_WORK_ITEM_TYPE
    normalize_priority: bool = False
    backfill_step_metadata: bool = False


DEFAULT_RECOVERY_OPTIONS = RecoveryOptions()
