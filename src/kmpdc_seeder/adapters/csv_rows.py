"""CSV transport for raw register rows."""

from __future__ import annotations

import csv
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from kmpdc_seeder.adapters.kmpdc.schema import RawRowPayload
from kmpdc_seeder.domain.types import RAW_ROW_FIELDS, RawRow

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime
    from pathlib import Path

log = getLogger(__name__)

_FLUSH_EVERY = 50


class RawRowReadError(RuntimeError):
    """Raised when a raw-row CSV file cannot be read."""


def timestamped_csv_path(directory: Path, filename: str, now: datetime) -> Path:
    return directory / f"{now.strftime('%Y_%m_%d_%H%M%S')}_{filename}"


def latest_csv(directory: Path) -> Path:
    """Return the newest CSV in ``directory``; timestamped names sort chronologically."""
    candidates = sorted(directory.glob("*.csv")) if directory.is_dir() else []
    if not candidates:
        raise FileNotFoundError(f"No CSV files found in {directory}")
    return candidates[-1]


def write_raw_rows(path: Path, rows: Iterable[RawRow]) -> int:
    """Stream ``rows`` into ``path`` under the register's column names."""

    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=RAW_ROW_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row.as_mapping())
            count += 1
            if count % _FLUSH_EVERY == 0:
                handle.flush()
                log.debug("Wrote %s rows to %s", count, path)
    log.info("Wrote %s rows to %s", count, path)
    return count


def read_raw_rows(path: Path) -> list[RawRow]:
    """Read raw rows from a register CSV; absent columns read as empty strings."""

    try:
        with path.open(newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            if reader.fieldnames is None:
                raise RawRowReadError(f"CSV file has no header row: {path}")
            rows = [RawRowPayload.model_validate(record).to_domain() for record in reader]
    except OSError as exc:
        raise RawRowReadError(f"Failed to read CSV {path}: {exc}") from exc
    except (csv.Error, UnicodeDecodeError, ValidationError) as exc:
        raise RawRowReadError(f"Malformed CSV {path}: {exc}") from exc

    log.info("Read %s rows from %s", len(rows), path)
    return rows
