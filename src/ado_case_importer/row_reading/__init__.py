"""Row reading exports."""

from .row_sources import RowReadError, read_rows

__all__ = [
    "RowReadError",
    "read_rows",
]
