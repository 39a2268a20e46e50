"""Alias-based column value lookup for loosely named export rows."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def resolve_column_value(row: Mapping[object, object], aliases: Sequence[str]) -> str:
    """Return the first non-empty value for the given aliases, trimmed.

    Exact column names are tried first, in alias order. Only when none of them
    holds a value are the row's columns compared case-insensitively (ignoring
    surrounding whitespace) against the aliases, in alias order, then column
    order. A missing, ``None`` or blank value yields ``""``.
    """
    for alias in aliases:
        value = _present_value(row.get(alias))
        if value:
            return value

    for alias in aliases:
        wanted = _normalize_name(alias)
        for key, raw_value in row.items():
            if not isinstance(key, str) or _normalize_name(key) != wanted:
                continue
            value = _present_value(raw_value)
            if value:
                return value
    return ""


def has_column(columns: Sequence[object], aliases: Sequence[str]) -> bool:
    """Check whether any column name matches one of the aliases, ignoring case."""
    wanted = {_normalize_name(alias) for alias in aliases}
    return any(isinstance(column, str) and _normalize_name(column) in wanted for column in columns)


def is_blank_value(value: object) -> bool:
    return _present_value(value) == ""


def _present_value(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _normalize_name(name: str) -> str:
    return name.strip().lower()
