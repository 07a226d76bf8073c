"""JSON documents exchanged between the extract and import steps."""

from __future__ import annotations

import json
from dataclasses import asdict
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from kmpdc_seeder.domain.types import (
    PractitionerRecord,
    Qualification,
    ReferenceSets,
    RegistryExtraction,
)

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

PRACTITIONERS_DOCUMENT: Final[str] = "practitioners.json"
DEGREES_DOCUMENT: Final[str] = "degrees.json"
INSTITUTIONS_DOCUMENT: Final[str] = "institutions.json"
SPECIALITIES_DOCUMENT: Final[str] = "specialities.json"
SUB_SPECIALITIES_DOCUMENT: Final[str] = "subspecialities.json"
STATUSES_DOCUMENT: Final[str] = "statuses.json"
ADDRESSES_DOCUMENT: Final[str] = "addresses.json"


class ExtractionReadError(RuntimeError):
    """Raised when an exported document exists but cannot be parsed."""


class _ExportModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class QualificationPayload(_ExportModel):
    year: int = 0
    institution: str = ""
    degree: str = ""
    speciality: str = ""


class PractitionerPayload(_ExportModel):
    full_name: str = ""
    registration_number: str = ""
    address: str = ""
    discipline: str = ""
    speciality: str = ""
    sub_speciality: str = ""
    status: str = ""
    qualifications: list[QualificationPayload] = []

    def to_domain(self) -> PractitionerRecord:
        return PractitionerRecord(
            full_name=self.full_name,
            registration_number=self.registration_number,
            address=self.address,
            discipline=self.discipline,
            speciality=self.speciality,
            sub_speciality=self.sub_speciality,
            status=self.status,
            qualifications=tuple(
                Qualification(**item.model_dump()) for item in self.qualifications
            ),
        )


_PRACTITIONERS = TypeAdapter(list[PractitionerPayload])
_NAMES = TypeAdapter(list[str])
_SUB_SPECIALITIES = TypeAdapter(dict[str, list[str]])


def write_extraction(directory: Path, extraction: RegistryExtraction) -> dict[str, Path]:
    """Write the extraction as one JSON document per entity kind."""

    directory.mkdir(parents=True, exist_ok=True)
    references = extraction.reference_sets
    documents: dict[str, object] = {
        PRACTITIONERS_DOCUMENT: [asdict(record) for record in extraction.practitioners],
        DEGREES_DOCUMENT: list(references.degrees),
        INSTITUTIONS_DOCUMENT: list(references.institutions),
        SPECIALITIES_DOCUMENT: list(references.specialities),
        SUB_SPECIALITIES_DOCUMENT: {
            parent: list(names) for parent, names in references.sub_specialities.items()
        },
        STATUSES_DOCUMENT: list(references.statuses),
        ADDRESSES_DOCUMENT: list(references.addresses),
    }

    written: dict[str, Path] = {}
    for name, payload in documents.items():
        path = directory / name
        path.write_text(json.dumps(payload, indent=4, ensure_ascii=False), encoding="utf-8")
        written[name] = path
    log.info("Wrote %s documents to %s", len(written), directory)
    return written


def read_extraction(directory: Path) -> RegistryExtraction:
    """Load documents written by ``write_extraction``; missing documents read as empty."""

    practitioners = tuple(
        payload.to_domain()
        for payload in _load(directory, PRACTITIONERS_DOCUMENT, _PRACTITIONERS, [])
    )
    sub_specialities = _load(directory, SUB_SPECIALITIES_DOCUMENT, _SUB_SPECIALITIES, {})
    references = ReferenceSets(
        degrees=tuple(_load(directory, DEGREES_DOCUMENT, _NAMES, [])),
        institutions=tuple(_load(directory, INSTITUTIONS_DOCUMENT, _NAMES, [])),
        specialities=tuple(_load(directory, SPECIALITIES_DOCUMENT, _NAMES, [])),
        sub_specialities={parent: tuple(names) for parent, names in sub_specialities.items()},
        addresses=tuple(_load(directory, ADDRESSES_DOCUMENT, _NAMES, [])),
        statuses=tuple(_load(directory, STATUSES_DOCUMENT, _NAMES, [])),
    )
    return RegistryExtraction(
        practitioners=practitioners,
        reference_sets=references,
        rows_processed=len(practitioners),
        qualifications_parsed=sum(len(record.qualifications) for record in practitioners),
    )


def _load[T](directory: Path, name: str, adapter: TypeAdapter[T], default: T) -> T:
    path = directory / name
    if not path.exists():
        log.warning("Missing document %s, treating it as empty", path)
        return default
    try:
        return adapter.validate_json(path.read_bytes())
    except OSError as exc:
        raise ExtractionReadError(f"Failed to read {path}: {exc}") from exc
    except ValidationError as exc:
        raise ExtractionReadError(f"Invalid data in {path}: {exc}") from exc
