"""Ports for obtaining raw register rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kmpdc_seeder.domain.types import RawRow


@dataclass(slots=True)
class RawRowFetchResult:
    """Rows read from the register plus the number of table rows that were skipped."""

    rows: list[RawRow]
    skipped: int = 0


@runtime_checkable
class RawRowFetcher(Protocol):
    """Callable port for retrieving the register as raw rows."""

    def __call__(self) -> RawRowFetchResult: ...


__all__ = ["RawRowFetchResult", "RawRowFetcher"]
