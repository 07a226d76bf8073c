"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import RawRowFetcher, RawRowFetchResult
from .persistence import (
    PractitionerRepository,
    QualificationRepository,
    ReferenceRepository,
    SubSpecialityRepository,
)
from .unit_of_work import (
    RegistryRepositories,
    RegistryUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "PractitionerRepository",
    "QualificationRepository",
    "RawRowFetchResult",
    "RawRowFetcher",
    "ReferenceRepository",
    "RegistryRepositories",
    "RegistryUnitOfWork",
    "RepositoryCollection",
    "SubSpecialityRepository",
    "UnitOfWork",
]
