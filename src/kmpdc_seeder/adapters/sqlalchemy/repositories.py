"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import insert, select, update

from kmpdc_seeder.adapters.sqlalchemy.mappings import (
    practitioner_table,
    qualification_table,
    sub_speciality_table,
)

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.orm import Session

    from kmpdc_seeder.domain.types import PractitionerRecord


class SqlAlchemyReferenceRepository:
    """Name-keyed reference table (status, speciality, institution, degree, address)."""

    def __init__(self, session: Session, table: Table) -> None:
        self.session = session
        self._table = table

    def get_or_create(self, name: str) -> int:
        existing = self.find_id(name)
        if existing is not None:
            return existing
        result = self.session.execute(insert(self._table).values(name=name))
        return cast(int, result.inserted_primary_key[0])

    def find_id(self, name: str) -> int | None:
        stmt = select(self._table.c.id).where(self._table.c.name == name).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemySubSpecialityRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_or_create(self, speciality_id: int, name: str) -> int:
        existing = self.find_id(speciality_id, name)
        if existing is not None:
            return existing
        result = self.session.execute(
            insert(sub_speciality_table).values(speciality_id=speciality_id, name=name)
        )
        return cast(int, result.inserted_primary_key[0])

    def find_id(self, speciality_id: int, name: str) -> int | None:
        stmt = (
            select(sub_speciality_table.c.id)
            .where(sub_speciality_table.c.speciality_id == speciality_id)
            .where(sub_speciality_table.c.name == name)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyPractitionerRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def upsert(
        self,
        record: PractitionerRecord,
        *,
        status_id: int,
        speciality_id: int,
        sub_speciality_id: int,
        address_id: int,
    ) -> int:
        values = {
            "full_name": record.full_name,
            "discipline": record.discipline,
            "status_id": status_id,
            "speciality_id": speciality_id,
            "sub_speciality_id": sub_speciality_id,
            "address_id": address_id,
        }
        existing = self.find_id(record.registration_number)
        if existing is not None:
            self.session.execute(
                update(practitioner_table)
                .where(practitioner_table.c.id == existing)
                .values(**values)
            )
            return existing
        result = self.session.execute(
            insert(practitioner_table).values(
                registration_number=record.registration_number, **values
            )
        )
        return cast(int, result.inserted_primary_key[0])

    def find_id(self, registration_number: str) -> int | None:
        stmt = (
            select(practitioner_table.c.id)
            .where(practitioner_table.c.registration_number == registration_number)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyQualificationRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def link(
        self,
        practitioner_id: int,
        *,
        degree_id: int,
        institution_id: int,
        speciality_name: str,
        year: int,
    ) -> int:
        key = {
            "practitioner_id": practitioner_id,
            "degree_id": degree_id,
            "institution_id": institution_id,
            "speciality_name": speciality_name,
            "year_awarded": year,
        }
        stmt = select(qualification_table.c.id).limit(1)
        for column, value in key.items():
            stmt = stmt.where(qualification_table.c[column] == value)
        existing = self.session.execute(stmt).scalar_one_or_none()
        if existing is not None:
            return existing
        result = self.session.execute(insert(qualification_table).values(**key))
        return cast(int, result.inserted_primary_key[0])


if TYPE_CHECKING:
    from kmpdc_seeder.adapters.sqlalchemy.mappings import degree_table
    from kmpdc_seeder.domain.ports.persistence import (
        PractitionerRepository,
        QualificationRepository,
        ReferenceRepository,
        SubSpecialityRepository,
    )

    _session_stub = cast("Session", object())
    _reference_check: ReferenceRepository = SqlAlchemyReferenceRepository(
        _session_stub, degree_table
    )
    _sub_check: SubSpecialityRepository = SqlAlchemySubSpecialityRepository(_session_stub)
    _practitioner_check: PractitionerRepository = SqlAlchemyPractitionerRepository(
        _session_stub
    )
    _qualification_check: QualificationRepository = SqlAlchemyQualificationRepository(
        _session_stub
    )
