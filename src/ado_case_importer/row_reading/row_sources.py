"""Reading of ADO export files into ordered row mappings."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

CSV_SUFFIXES = frozenset({".csv"})
WORKBOOK_SUFFIXES = frozenset({".xlsx", ".xlsm"})

Row = dict[str, str]


class RowReadError(Exception):
    """Raised when an export file cannot be read as a table of rows."""


def read_rows(source_path: Path | str, sheet_name: str | None = None) -> list[Row]:
    """Read a CSV or Excel export and return one mapping per data row.

    Keys are the header cells exactly as written in the first row. Blank lines
    are skipped. An empty file yields an empty list.
    """
    path = Path(source_path)
    if not path.exists():
        raise RowReadError(f"Import file not found: {path}")
    suffix = path.suffix.lower()
    if suffix in CSV_SUFFIXES:
        if sheet_name:
            raise RowReadError("A sheet name can only be given for Excel workbooks.")
        return _read_csv_rows(path)
    if suffix in WORKBOOK_SUFFIXES:
        return _read_workbook_rows(path, sheet_name)
    raise RowReadError(f"Unsupported import file type '{path.suffix}': expected .csv or .xlsx")


def _read_csv_rows(path: Path) -> list[Row]:
    try:
        with path.open(encoding="utf-8-sig", newline="") as handle:
            records = [record for record in csv.reader(handle) if not _is_blank_record(record)]
    except UnicodeDecodeError as exc:
        raise RowReadError(f"Import file is not valid UTF-8: {path}") from exc
    except csv.Error as exc:
        raise RowReadError(f"Failed to parse CSV file {path}: {exc}") from exc
    except OSError as exc:
        raise RowReadError(f"Failed to read import file {path}: {exc}") from exc
    return _records_to_rows(records)


def _read_workbook_rows(path: Path, sheet_name: str | None) -> list[Row]:
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as exc:
        raise RowReadError(f"Failed to open workbook {path}: {exc}") from exc
    try:
        if sheet_name is not None:
            if sheet_name not in workbook.sheetnames:
                raise RowReadError(f"Workbook has no sheet named '{sheet_name}'.")
            sheet = workbook[sheet_name]
        else:
            sheet = workbook.worksheets[0]
        records = [
            [_cell_text(value) for value in values]
            for values in sheet.iter_rows(values_only=True)
        ]
    finally:
        workbook.close()
    return _records_to_rows(record for record in records if not _is_blank_record(record))


def _records_to_rows(records: Iterable[Sequence[str]]) -> list[Row]:
    iterator = iter(records)
    header = next(iterator, None)
    if header is None:
        return []
    columns = _header_columns(header)
    rows: list[Row] = []
    for record in iterator:
        row: Row = {}
        for index, name in columns:
            row[name] = record[index] if index < len(record) else ""
        rows.append(row)
    return rows


def _header_columns(header: Sequence[str]) -> list[tuple[int, str]]:
    columns: list[tuple[int, str]] = []
    seen: set[str] = set()
    for index, name in enumerate(header):
        if not name.strip() or name in seen:
            continue
        seen.add(name)
        columns.append((index, name))
    return columns


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_blank_record(record: Sequence[str]) -> bool:
    return all(not cell.strip() for cell in record)
