"""SQLAlchemy adapter package for the registry seeder."""

from __future__ import annotations

from .mappings import create_all_tables, metadata
from .repositories import (
    SqlAlchemyPractitionerRepository,
    SqlAlchemyQualificationRepository,
    SqlAlchemyReferenceRepository,
    SqlAlchemySubSpecialityRepository,
)
from .unit_of_work import SqlAlchemyRegistryUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "SqlAlchemyPractitionerRepository",
    "SqlAlchemyQualificationRepository",
    "SqlAlchemyReferenceRepository",
    "SqlAlchemyRegistryUnitOfWork",
    "SqlAlchemySubSpecialityRepository",
    "StartupError",
    "create_all_tables",
    "metadata",
    "shutdown",
    "startup",
]
