"""SQLAlchemy table metadata for the normalized register."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, MetaData, String, Table, UniqueConstraint

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)


def _reference_table(name: str) -> Table:
    return Table(
        name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("name", String, nullable=False, unique=True),
    )


status_table = _reference_table("status")
speciality_table = _reference_table("speciality")
institution_table = _reference_table("institution")
degree_table = _reference_table("degree")
address_table = _reference_table("address")

sub_speciality_table = Table(
    "sub_speciality",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("speciality_id", ForeignKey("speciality.id"), nullable=False),
    Column("name", String, nullable=False),
    UniqueConstraint("speciality_id", "name"),
)

practitioner_table = Table(
    "practitioner",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("registration_number", String, nullable=False, unique=True),
    Column("full_name", String, nullable=False),
    Column("discipline", String, nullable=False, default=""),
    Column("address_id", ForeignKey("address.id"), nullable=False),
    Column("status_id", ForeignKey("status.id"), nullable=False),
    Column("speciality_id", ForeignKey("speciality.id"), nullable=False),
    Column("sub_speciality_id", ForeignKey("sub_speciality.id"), nullable=False),
)

# speciality_name is stored as "" rather than NULL so the natural key stays unique.
qualification_table = Table(
    "qualification",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("practitioner_id", ForeignKey("practitioner.id"), nullable=False),
    Column("degree_id", ForeignKey("degree.id"), nullable=False),
    Column("institution_id", ForeignKey("institution.id"), nullable=False),
    Column("speciality_name", String, nullable=False, default=""),
    Column("year_awarded", Integer, nullable=False, default=0),
    UniqueConstraint(
        "practitioner_id", "degree_id", "institution_id", "speciality_name", "year_awarded"
    ),
)


def create_all_tables(engine: Engine) -> None:
    """Create every register table that does not exist yet."""

    metadata.create_all(engine, checkfirst=True)
    log.debug("Ensured register tables on %s", engine.url)
