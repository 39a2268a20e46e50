"""Export file reading tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from ado_case_importer.row_reading import RowReadError, read_rows
from openpyxl import Workbook


def _write_csv(path: Path, text: str, encoding: str = "utf-8") -> Path:
    path.write_text(text, encoding=encoding, newline="")
    return path


def _write_workbook(path: Path, rows: list[list[object]], sheet_name: str = "Sheet") -> Path:
    workbook = Workbook()
    sheet = workbook.active
    assert sheet is not None
    sheet.title = sheet_name
    for row in rows:
        sheet.append(row)
    workbook.save(path)
    return path


def test_reads_csv_rows_keyed_by_header(tmp_path: Path) -> None:
    path = _write_csv(
        tmp_path / "export.csv",
        'ID,Title,Test Step,Step Action\r\n1,Login,,\r\n,,1,"Enter ""user"", then tab"\r\n',
    )

    rows = read_rows(path)

    assert rows == [
        {"ID": "1", "Title": "Login", "Test Step": "", "Step Action": ""},
        {"ID": "", "Title": "", "Test Step": "1", "Step Action": 'Enter "user", then tab'},
    ]


def test_csv_byte_order_mark_is_stripped(tmp_path: Path) -> None:
    path = _write_csv(tmp_path / "export.csv", "Title,Test Step\nLogin,\n", encoding="utf-8-sig")

    rows = read_rows(path)

    assert list(rows[0].keys()) == ["Title", "Test Step"]


def test_csv_header_spelling_is_preserved(tmp_path: Path) -> None:
    path = _write_csv(tmp_path / "export.csv", " test case id ,TITLE\n7,Login\n")

    assert read_rows(path) == [{" test case id ": "7", "TITLE": "Login"}]


def test_csv_blank_lines_are_skipped_and_short_rows_padded(tmp_path: Path) -> None:
    path = _write_csv(
        tmp_path / "export.csv",
        "Title,Test Step,Step Action\n\nLogin\n , , \n,1,Go,extra\n",
    )

    rows = read_rows(path)

    assert rows == [
        {"Title": "Login", "Test Step": "", "Step Action": ""},
        {"Title": "", "Test Step": "1", "Step Action": "Go"},
    ]


def test_csv_duplicate_header_keeps_first_column(tmp_path: Path) -> None:
    path = _write_csv(tmp_path / "export.csv", "Title,Title\nfirst,second\n")

    assert read_rows(path) == [{"Title": "first"}]


def test_empty_csv_yields_no_rows(tmp_path: Path) -> None:
    assert read_rows(_write_csv(tmp_path / "export.csv", "")) == []
    assert read_rows(_write_csv(tmp_path / "header-only.csv", "Title,Test Step\n")) == []


def test_non_utf8_csv_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "export.csv"
    path.write_bytes(b"Title\n\xff\xfe\xfa\n")

    with pytest.raises(RowReadError, match="not valid UTF-8"):
        read_rows(path)


def test_reads_workbook_rows_as_text(tmp_path: Path) -> None:
    path = _write_workbook(
        tmp_path / "export.xlsx",
        [
            ["ID", "Title", "Test Step", "Step Action", None],
            [101, "Login", None, None, None],
            [None, None, None, None, None],
            [None, None, 1, "Enter user", None],
            [None, None, 2.0, "Enter password", None],
            [None, None, 2.5, "Half step", None],
        ],
    )

    rows = read_rows(path)

    assert rows == [
        {"ID": "101", "Title": "Login", "Test Step": "", "Step Action": ""},
        {"ID": "", "Title": "", "Test Step": "1", "Step Action": "Enter user"},
        {"ID": "", "Title": "", "Test Step": "2", "Step Action": "Enter password"},
        {"ID": "", "Title": "", "Test Step": "2.5", "Step Action": "Half step"},
    ]


def test_reads_named_workbook_sheet(tmp_path: Path) -> None:
    path = _write_workbook(tmp_path / "export.xlsx", [["Title"], ["Login"]], sheet_name="Cases")

    assert read_rows(path, sheet_name="Cases") == [{"Title": "Login"}]
    with pytest.raises(RowReadError, match="no sheet named 'Missing'"):
        read_rows(path, sheet_name="Missing")


def test_missing_file_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(RowReadError, match="Import file not found"):
        read_rows(tmp_path / "missing.csv")


def test_directory_named_like_csv_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "export.csv"
    path.mkdir()

    with pytest.raises(RowReadError, match="Failed to read import file"):
        read_rows(path)


def test_directory_named_like_workbook_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "export.xlsx"
    path.mkdir()

    with pytest.raises(RowReadError, match="Failed to open workbook"):
        read_rows(path)


def test_unsupported_file_type_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "export.txt"
    path.write_text("Title\nLogin\n", encoding="utf-8")

    with pytest.raises(RowReadError, match="Unsupported import file type"):
        read_rows(path)


def test_corrupt_workbook_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "export.xlsx"
    path.write_text("not a workbook", encoding="utf-8")

    with pytest.raises(RowReadError, match="Failed to open workbook"):
        read_rows(path)


def test_sheet_name_is_rejected_for_csv(tmp_path: Path) -> None:
    path = _write_csv(tmp_path / "export.csv", "Title\nLogin\n")

    with pytest.raises(RowReadError, match="only be given for Excel"):
        read_rows(path, sheet_name="Cases")
