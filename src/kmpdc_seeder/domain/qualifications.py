"""Parsing of free-text qualification fields.

A register qualifications field lists one degree per comma-separated fragment,
for example ``"MBChB(Nairobi) 2005, M.Med(Gen.Surg)(Nairobi) 2010"``. Each
fragment follows one of two shapes:

- ``Degree(Institution) Year``
- ``Degree(Speciality)(Institution) Year``

The year may sit anywhere in the fragment. Fragments that do not end in a
well-formed ``(...)`` group, or whose degree still holds a nested group after
the speciality has been unwound, cannot be read and are discarded.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from .degrees import default_standardizer
from .text import normalize_entity_value
from .types import (
    DiscardedSegment,
    DiscardReason,
    ParsedSegment,
    Qualification,
    QualificationParse,
)

if TYPE_CHECKING:
    from .degrees import DegreeStandardizer
    from .types import SegmentOutcome

FRAGMENT_SEPARATOR: Final[str] = ","

_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"\d+")
_MAX_YEAR_DIGITS: Final[int] = 4
_SEPARATOR_PUNCTUATION_RE: Final[re.Pattern[str]] = re.compile(r"[,;]")
_TRAILING_GROUP_RE: Final[re.Pattern[str]] = re.compile(r"\(([^()]+)\)$")


def parse_segment(
    fragment: str,
    *,
    standardizer: DegreeStandardizer | None = None,
) -> SegmentOutcome:
    """Extract year, institution, degree and speciality from one fragment."""

    year = _read_year(fragment)
    expression = _SEPARATOR_PUNCTUATION_RE.sub("", _DIGITS_RE.sub("", fragment)).strip()
    if not expression:
        return DiscardedSegment(fragment, DiscardReason.EMPTY)

    split = _split_trailing_group(expression)
    if split is None:
        return DiscardedSegment(fragment, DiscardReason.NO_TRAILING_GROUP)
    degree, institution = split

    speciality = ""
    # Only one extra level is unwound: Degree(Speciality)(Institution).
    inner = _split_trailing_group(degree)
    if inner is not None:
        degree, speciality = inner
    if _has_nested_group(degree):
        return DiscardedSegment(fragment, DiscardReason.NESTED_GROUP)

    degree = (standardizer or default_standardizer()).standardize(degree.upper())

    return ParsedSegment(
        Qualification(
            year=year,
            institution=normalize_entity_value(institution).upper(),
            degree=degree,
            speciality=normalize_entity_value(speciality).upper(),
        )
    )


def split_and_parse(
    raw: str,
    *,
    standardizer: DegreeStandardizer | None = None,
) -> QualificationParse:
    """Parse every fragment of ``raw`` in order, keeping track of discarded ones."""

    if not raw:
        return QualificationParse()

    qualifications: list[Qualification] = []
    discarded: list[DiscardedSegment] = []
    for fragment in raw.split(FRAGMENT_SEPARATOR):
        match parse_segment(fragment, standardizer=standardizer):
            case ParsedSegment(qualification=qualification):
                qualifications.append(qualification)
            case DiscardedSegment() as dropped:
                discarded.append(dropped)
    return QualificationParse(qualifications=tuple(qualifications), discarded=tuple(discarded))


def _split_trailing_group(text: str) -> tuple[str, str] | None:
    """Return ``(prefix, inner)`` for ``prefix(inner)`` at the end of ``text``."""
    match = _TRAILING_GROUP_RE.search(text)
    if match is None:
        return None
    return text[: match.start()].strip(), match.group(1)


def _has_nested_group(text: str) -> bool:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")" and depth:
            if depth > 1:
                return True
            depth -= 1
    return False


def _read_year(fragment: str) -> int:
    """Return the first digit run as the year, or 0 when absent or longer than a year."""
    match = _DIGITS_RE.search(fragment)
    if match is None or len(match.group()) > _MAX_YEAR_DIGITS:
        return 0
    return int(match.group())
