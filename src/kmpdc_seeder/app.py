"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from kmpdc_seeder.adapters.csv_rows import (
    latest_csv,
    read_raw_rows,
    timestamped_csv_path,
    write_raw_rows,
)
from kmpdc_seeder.adapters.json_export import read_extraction, write_extraction
from kmpdc_seeder.adapters.kmpdc import KmpdcRegisterFetcher
from kmpdc_seeder.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyRegistryUnitOfWork,
    is_started,
    startup,
)
from kmpdc_seeder.config.storage import StorageConfig, get_storage_config
from kmpdc_seeder.domain.degrees import default_standardizer
from kmpdc_seeder.domain.importing import ImportRegistryResult, import_registry
from kmpdc_seeder.domain.pipeline import normalize_registry
from kmpdc_seeder.domain.ports.unit_of_work import RegistryUnitOfWork

if TYPE_CHECKING:
    from pathlib import Path

    from kmpdc_seeder.domain.degrees import DegreeStandardizer
    from kmpdc_seeder.domain.ports.fetching import RawRowFetcher
    from kmpdc_seeder.domain.types import RegistryExtraction

UnitOfWorkFactory = Callable[[], RegistryUnitOfWork]


log = getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class SyncRegistryResult:
    csv_path: Path
    rows: int
    skipped: int


@dataclass(slots=True)
class ExtractRegistryResult:
    csv_path: Path
    extraction: RegistryExtraction
    documents: dict[str, Path] | None = None


def sync_registry(
    *,
    fetcher: RawRowFetcher | None = None,
    storage: StorageConfig | None = None,
    now_provider: Callable[[], datetime] = _utcnow,
) -> SyncRegistryResult:
    """Scrape the register and stream its rows into a timestamped CSV file."""

    storage_config = storage or get_storage_config()
    effective_fetcher = fetcher or KmpdcRegisterFetcher()
    result = effective_fetcher()

    csv_path = timestamped_csv_path(
        storage_config.csv_directory(), storage_config.csv_filename, now_provider()
    )
    written = write_raw_rows(csv_path, result.rows)
    log.info(
        "Finished register sync: rows=%s, skipped=%s, csv=%s", written, result.skipped, csv_path
    )
    return SyncRegistryResult(csv_path=csv_path, rows=written, skipped=result.skipped)


def extract_registry(
    *,
    csv_path: Path | None = None,
    storage: StorageConfig | None = None,
    standardizer: DegreeStandardizer | None = None,
    export: bool = True,
) -> ExtractRegistryResult:
    """Normalize the latest scraped CSV (or ``csv_path``) and export the JSON documents."""

    storage_config = storage or get_storage_config()
    effective_standardizer = standardizer or default_standardizer()
    source = csv_path or latest_csv(storage_config.csv_directory(ensure=False))
    log.info("Reading register rows from %s", source)

    extraction = normalize_registry(read_raw_rows(source), standardizer=effective_standardizer)

    documents = None
    if export:
        documents = write_extraction(storage_config.extraction_directory(), extraction)
    return ExtractRegistryResult(csv_path=source, extraction=extraction, documents=documents)


def import_registry_data(
    *,
    data_dir: Path | None = None,
    storage: StorageConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ImportRegistryResult:
    """Load exported JSON documents and import them through the configured persistence."""

    storage_config = storage or get_storage_config()
    directory = data_dir or storage_config.extraction_directory(ensure=False)
    if not directory.is_dir():
        raise FileNotFoundError(f"Data path not found: {directory}")

    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyRegistryUnitOfWork

    log.info("Importing register data from %s", directory)
    return import_registry(read_extraction(directory), unit_of_work_factory=unit_of_work_factory)
