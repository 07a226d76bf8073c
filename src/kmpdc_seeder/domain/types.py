"""Domain value types for the practitioners register."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

RAW_ROW_FIELDS: Final[tuple[str, ...]] = (
    "Fullname",
    "Reg_No",
    "Address",
    "Qualifications",
    "Discipline",
    "Speciality",
    "Sub_Speciality",
    "Status",
    "View_URL",
)


@dataclass(frozen=True, slots=True, kw_only=True)
class RawRow:
    """One register row as scraped, every field untrimmed and possibly empty."""

    full_name: str = ""
    registration_number: str = ""
    address: str = ""
    qualifications: str = ""
    discipline: str = ""
    speciality: str = ""
    sub_speciality: str = ""
    status: str = ""
    view_url: str = ""

    def as_mapping(self) -> dict[str, str]:
        return dict(
            zip(
                RAW_ROW_FIELDS,
                (
                    self.full_name,
                    self.registration_number,
                    self.address,
                    self.qualifications,
                    self.discipline,
                    self.speciality,
                    self.sub_speciality,
                    self.status,
                    self.view_url,
                ),
                strict=True,
            )
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Qualification:
    """A single degree earned: year (0 when unknown), institution, degree, speciality."""

    year: int = 0
    institution: str = ""
    degree: str = ""
    speciality: str = ""


class DiscardReason(StrEnum):
    EMPTY = "empty"
    NO_TRAILING_GROUP = "no_trailing_group"
    NESTED_GROUP = "nested_group"


@dataclass(frozen=True, slots=True)
class ParsedSegment:
    qualification: Qualification


@dataclass(frozen=True, slots=True)
class DiscardedSegment:
    fragment: str
    reason: DiscardReason


type SegmentOutcome = ParsedSegment | DiscardedSegment


@dataclass(frozen=True, slots=True)
class QualificationParse:
    """Ordered qualifications parsed from one field plus the fragments that were dropped."""

    qualifications: tuple[Qualification, ...] = ()
    discarded: tuple[DiscardedSegment, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class PractitionerRecord:
    full_name: str
    registration_number: str
    address: str = ""
    discipline: str = ""
    speciality: str = ""
    sub_speciality: str = ""
    status: str = ""
    qualifications: tuple[Qualification, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceSets:
    """Finalized, sorted reference values shared across practitioner records."""

    degrees: tuple[str, ...] = ()
    institutions: tuple[str, ...] = ()
    specialities: tuple[str, ...] = ()
    sub_specialities: Mapping[str, tuple[str, ...]] = field(
        default_factory=dict[str, tuple[str, ...]]
    )
    addresses: tuple[str, ...] = ()
    statuses: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class RegistryExtraction:
    """Outcome of normalizing a sequence of raw register rows."""

    practitioners: tuple[PractitionerRecord, ...] = ()
    reference_sets: ReferenceSets = field(default_factory=ReferenceSets)
    rows_processed: int = 0
    qualifications_parsed: int = 0
    fragments_discarded: int = 0
