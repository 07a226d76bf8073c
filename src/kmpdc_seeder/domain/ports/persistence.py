"""Ports for persisting normalized register entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kmpdc_seeder.domain.types import PractitionerRecord


@runtime_checkable
class ReferenceRepository(Protocol):
    """Name-keyed lookup table (degrees, institutions, specialities, statuses, addresses)."""

    def get_or_create(self, name: str) -> int: ...

    def find_id(self, name: str) -> int | None: ...


@runtime_checkable
class SubSpecialityRepository(Protocol):
    """Sub-specialities keyed by name under their parent speciality."""

    def get_or_create(self, speciality_id: int, name: str) -> int: ...

    def find_id(self, speciality_id: int, name: str) -> int | None: ...


@runtime_checkable
class PractitionerRepository(Protocol):
    """Practitioners keyed by registration number."""

    def upsert(
        self,
        record: PractitionerRecord,
        *,
        status_id: int,
        speciality_id: int,
        sub_speciality_id: int,
        address_id: int,
    ) -> int: ...


@runtime_checkable
class QualificationRepository(Protocol):
    """Qualification link records keyed by their full natural key."""

    def link(
        self,
        practitioner_id: int,
        *,
        degree_id: int,
        institution_id: int,
        speciality_name: str,
        year: int,
    ) -> int: ...
