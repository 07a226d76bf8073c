"""Application service for importing a normalized register into persistence."""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from kmpdc_seeder.domain.ports.persistence import ReferenceRepository
    from kmpdc_seeder.domain.ports.unit_of_work import RegistryRepositories, RegistryUnitOfWork
    from kmpdc_seeder.domain.types import PractitionerRecord, RegistryExtraction

UNKNOWN: Final[str] = "UNKNOWN"

log = getLogger(__name__)


@dataclass(slots=True)
class ImportRegistryResult:
    """Outcome of an import run."""

    statuses: int = 0
    specialities: int = 0
    sub_specialities: int = 0
    institutions: int = 0
    degrees: int = 0
    addresses: int = 0
    practitioners: int = 0
    practitioners_skipped: int = 0
    qualifications: int = 0


@dataclass(slots=True)
class _NameIndex:
    """Resolves names to identifiers of one reference table, falling back to UNKNOWN."""

    repository: ReferenceRepository
    unknown_id: int
    ids: dict[str, int]

    @classmethod
    def seed(cls, repository: ReferenceRepository, names: Iterable[str]) -> _NameIndex:
        index = cls(repository=repository, unknown_id=repository.get_or_create(UNKNOWN), ids={})
        for name in names:
            key = name.strip()
            if key and key not in index.ids:
                index.ids[key] = repository.get_or_create(key)
        return index

    def resolve(self, name: str) -> int:
        key = name.strip()
        if not key:
            return self.unknown_id
        if key not in self.ids:
            found = self.repository.find_id(key)
            if found is None:
                return self.unknown_id
            self.ids[key] = found
        return self.ids[key]

    @property
    def imported(self) -> int:
        return len(self.ids)


def import_registry(
    extraction: RegistryExtraction,
    *,
    unit_of_work_factory: Callable[[], RegistryUnitOfWork],
) -> ImportRegistryResult:
    """Persist reference sets first, then practitioners and their qualifications.

    Every reference table receives an ``UNKNOWN`` row that practitioner and
    qualification references fall back to when their value has no entity. The
    import runs in a single unit of work and is safe to repeat.
    """

    result = ImportRegistryResult()
    references = extraction.reference_sets

    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        statuses = _NameIndex.seed(repositories.statuses, references.statuses)
        specialities = _NameIndex.seed(
            repositories.specialities,
            (*references.specialities, *references.sub_specialities),
        )
        institutions = _NameIndex.seed(repositories.institutions, references.institutions)
        degrees = _NameIndex.seed(repositories.degrees, references.degrees)
        addresses = _NameIndex.seed(repositories.addresses, references.addresses)
        unknown_sub_speciality = repositories.sub_specialities.get_or_create(
            specialities.unknown_id, UNKNOWN
        )

        for parent, names in references.sub_specialities.items():
            parent_id = specialities.resolve(parent)
            for name in names:
                if name.strip():
                    repositories.sub_specialities.get_or_create(parent_id, name.strip())
                    result.sub_specialities += 1

        for raw_record in extraction.practitioners:
            registration_number = raw_record.registration_number.strip()
            if not registration_number:
                result.practitioners_skipped += 1
                continue
            # Registration numbers key the upsert, so surrounding whitespace is dropped.
            record = replace(raw_record, registration_number=registration_number)
            speciality_id = specialities.resolve(record.speciality)
            sub_speciality_id = _resolve_sub_speciality(
                repositories, speciality_id, record, fallback=unknown_sub_speciality
            )
            practitioner_id = repositories.practitioners.upsert(
                record,
                status_id=statuses.resolve(record.status),
                speciality_id=speciality_id,
                sub_speciality_id=sub_speciality_id,
                address_id=addresses.resolve(record.address),
            )
            result.practitioners += 1

            for qualification in record.qualifications:
                repositories.qualifications.link(
                    practitioner_id,
                    degree_id=degrees.resolve(qualification.degree),
                    institution_id=institutions.resolve(qualification.institution),
                    speciality_name=qualification.speciality,
                    year=qualification.year,
                )
                result.qualifications += 1

            if result.practitioners % 200 == 0:
                log.info("Imported %s practitioners", result.practitioners)

        uow.commit()

    result.statuses = statuses.imported
    result.specialities = specialities.imported
    result.institutions = institutions.imported
    result.degrees = degrees.imported
    result.addresses = addresses.imported
    log.info(
        "Imported register: practitioners=%s (skipped=%s), qualifications=%s, "
        "degrees=%s, institutions=%s, specialities=%s, sub_specialities=%s",
        result.practitioners,
        result.practitioners_skipped,
        result.qualifications,
        result.degrees,
        result.institutions,
        result.specialities,
        result.sub_specialities,
    )
    return result


def _resolve_sub_speciality(
    repositories: RegistryRepositories,
    speciality_id: int,
    record: PractitionerRecord,
    *,
    fallback: int,
) -> int:
    name = record.sub_speciality.strip()
    if not name:
        return fallback
    found = repositories.sub_specialities.find_id(speciality_id, name)
    return fallback if found is None else found
