"""Column alias table for ADO test-case exports."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class ColumnAliases:  # pylint: disable=too-many-instance-attributes
    """Accepted column names per semantic field, most preferred first."""

    external_id: tuple[str, ...] = ("ID", "Id", "Test Case ID")
    title: tuple[str, ...] = ("Title", "Name")
    step_number: tuple[str, ...] = ("Test Step", "Step")
    step_action: tuple[str, ...] = ("Step Action", "Action")
    step_expected: tuple[str, ...] = ("Step Expected", "Expected")
    assigned_to: tuple[str, ...] = ("Assigned To",)
    area_path: tuple[str, ...] = ("Area Path",)
    scenario_type: tuple[str, ...] = ("Scenario Type",)
    priority: tuple[str, ...] = ("Priority",)
    description: tuple[str, ...] = ("Description",)
    state: tuple[str, ...] = ("State",)
    work_item_type: tuple[str, ...] = ("Work Item Type",)

    def extended_with(self, extra_aliases: Mapping[str, Sequence[str]]) -> ColumnAliases:
        """Return a copy with extra aliases appended after the built-in ones.

        Raises:
          KeyError: If a field name is not part of the alias table.
        """
        known = field_names()
        changes: dict[str, tuple[str, ...]] = {}
        for field_name, aliases in extra_aliases.items():
            if field_name not in known:
                raise KeyError(field_name)
            current = getattr(self, field_name)
            additions = tuple(alias for alias in aliases if alias not in current)
            changes[field_name] = current + additions
        return replace(self, **changes)


DEFAULT_COLUMN_ALIASES = ColumnAliases()


def field_names() -> tuple[str, ...]:
    """Semantic field names known to the alias table."""
    return tuple(item.name for item in fields(ColumnAliases))
