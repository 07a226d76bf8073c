"""Degree spelling standardization."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cache
from types import MappingProxyType
from typing import TYPE_CHECKING

from kmpdc_seeder.config.degrees import load_degree_synonyms

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class DegreeStandardizer:
    """Map known degree spellings onto their canonical code by exact lookup."""

    synonyms: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "synonyms", MappingProxyType(dict(self.synonyms)))

    @classmethod
    def from_config(cls, path: str | None = None) -> DegreeStandardizer:
        return cls(load_degree_synonyms(path))

    def standardize(self, degree: str) -> str:
        """Return the canonical code for ``degree`` (upper-cased, trimmed) or ``degree`` itself."""
        return self.synonyms.get(degree, degree)


@cache
def default_standardizer() -> DegreeStandardizer:
    """Standardizer backed by the configured synonym table, loaded once per process."""
    return DegreeStandardizer.from_config()
