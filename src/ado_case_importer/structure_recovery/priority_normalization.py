"""Mapping of free-form ADO priority values onto named levels."""

from __future__ import annotations

_PRIORITY_LEVELS: tuple[tuple[str, str, str, str], ...] = (
    ("1", "critical", "p1", "Critical"),
    ("2", "high", "p2", "High"),
    ("3", "medium", "p3", "Medium"),
    ("4", "low", "p4", "Low"),
)


def normalize_priority(value: str, default: str) -> str:
    """Map numeric, ``pN`` and named priorities to Critical/High/Medium/Low.

    Unrecognized or empty values fall back to ``default``.
    """
    normalized = value.strip().lower()
    if not normalized:
        return default
    for number, name, short_name, level in _PRIORITY_LEVELS:
        if normalized == number or name in normalized or short_name in normalized:
            return level
    return default
