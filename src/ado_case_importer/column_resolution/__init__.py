"""Column resolution exports."""

from .column_aliases import DEFAULT_COLUMN_ALIASES, ColumnAliases, field_names
from .value_resolver import has_column, is_blank_value, resolve_column_value

__all__ = [
    "ColumnAliases",
    "DEFAULT_COLUMN_ALIASES",
    "field_names",
    "has_column",
    "is_blank_value",
    "resolve_column_value",
]
