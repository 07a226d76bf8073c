from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from kmpdc_seeder.adapters.csv_rows import (
    RawRowReadError,
    latest_csv,
    read_raw_rows,
    timestamped_csv_path,
    write_raw_rows,
)
from kmpdc_seeder.domain.types import RAW_ROW_FIELDS, RawRow
from tests.helpers.registry import make_raw_row

if TYPE_CHECKING:
    from pathlib import Path


def test_write_raw_rows_uses_register_headers(tmp_path: Path) -> None:
    path = tmp_path / "csv" / "rows.csv"

    written = write_raw_rows(path, [make_raw_row("1001"), make_raw_row("1002")])

    header = path.read_text(encoding="utf-8").splitlines()[0]
    assert written == 2
    assert header == ",".join(RAW_ROW_FIELDS)


def test_read_raw_rows_returns_written_rows(tmp_path: Path) -> None:
    path = tmp_path / "rows.csv"
    rows = [
        make_raw_row("1001"),
        make_raw_row("1002", qualifications='MBChB(Moi) 2012, "quoted"', address=" padded "),
    ]
    write_raw_rows(path, rows)

    assert read_raw_rows(path) == rows


def test_read_raw_rows_fills_missing_columns(tmp_path: Path) -> None:
    path = tmp_path / "partial.csv"
    path.write_text("Fullname,Reg_No\nDr. Short,42\nDr. Shorter\n", encoding="utf-8")

    rows = read_raw_rows(path)

    assert rows == [
        RawRow(full_name="Dr. Short", registration_number="42"),
        RawRow(full_name="Dr. Shorter"),
    ]


def test_read_raw_rows_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RawRowReadError):
        read_raw_rows(tmp_path / "absent.csv")


def test_read_raw_rows_raises_for_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(RawRowReadError):
        read_raw_rows(path)


def test_latest_csv_picks_newest_timestamped_file(tmp_path: Path) -> None:
    older = timestamped_csv_path(tmp_path, "kmpdc.csv", datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC))
    newer = timestamped_csv_path(tmp_path, "kmpdc.csv", datetime(2025, 2, 1, 0, 0, 0, tzinfo=UTC))
    older.write_text("Fullname\n", encoding="utf-8")
    newer.write_text("Fullname\n", encoding="utf-8")

    assert older.name == "2025_01_02_030405_kmpdc.csv"
    assert latest_csv(tmp_path) == newer


def test_latest_csv_raises_when_directory_is_empty(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        latest_csv(tmp_path)
    with pytest.raises(FileNotFoundError):
        latest_csv(tmp_path / "missing")
