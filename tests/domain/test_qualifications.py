from __future__ import annotations

import pytest

from kmpdc_seeder.domain.degrees import DegreeStandardizer
from kmpdc_seeder.domain.qualifications import parse_segment, split_and_parse
from kmpdc_seeder.domain.types import (
    DiscardedSegment,
    DiscardReason,
    ParsedSegment,
    Qualification,
)

STANDARDIZER = DegreeStandardizer({"MMED": "M.MED", "M.MED(GEN.SURG": "M.MED"})


def _parsed(fragment: str) -> Qualification:
    outcome = parse_segment(fragment, standardizer=STANDARDIZER)
    assert isinstance(outcome, ParsedSegment)
    return outcome.qualification


def test_parse_segment_reads_flat_degree_and_institution() -> None:
    assert _parsed("MBChB(Nairobi)") == Qualification(
        year=0, institution="NAIROBI", degree="MBCHB", speciality=""
    )


def test_parse_segment_reads_speciality_and_year() -> None:
    assert _parsed(" M.Med(Gen.Surg)(Nairobi) 2010") == Qualification(
        year=2010, institution="NAIROBI", degree="M.MED", speciality="GEN.SURG"
    )


def test_parse_segment_standardizes_degree_after_speciality_is_removed() -> None:
    assert _parsed("MMed(Paed)(Moi) 2015") == Qualification(
        year=2015, institution="MOI", degree="M.MED", speciality="PAED"
    )


def test_parse_segment_takes_first_digit_run_as_year() -> None:
    qualification = _parsed("MBChB(Nairobi)2005 1999")

    assert qualification.year == 2005
    assert qualification.institution == "NAIROBI"


def test_parse_segment_ignores_digit_runs_too_long_for_a_year() -> None:
    assert _parsed("MBChB(Nairobi) " + "2" * 5000) == Qualification(
        year=0, institution="NAIROBI", degree="MBCHB", speciality=""
    )
    assert _parsed("MBChB(Nairobi) 20051").year == 0


def test_parse_segment_decodes_entity_artifacts_in_groups() -> None:
    qualification = _parsed("M.Med(Obs&ampGynae)(Kenyatta  Univ) 2012")

    assert qualification.speciality == "OBS & GYNAE"
    assert qualification.institution == "KENYATTA UNIV"


def test_parse_segment_keeps_unbalanced_degree_spellings() -> None:
    assert _parsed("M.Med(Gen.Surg(Nairobi) 2011") == Qualification(
        year=2011, institution="NAIROBI", degree="M.MED", speciality=""
    )


def test_parse_segment_drops_separator_punctuation() -> None:
    assert _parsed("BDS(Nairobi);") == Qualification(institution="NAIROBI", degree="BDS")


@pytest.mark.parametrize(
    ("fragment", "reason"),
    [
        ("", DiscardReason.EMPTY),
        ("   2010 ", DiscardReason.EMPTY),
        ("MBChB Nairobi 2005", DiscardReason.NO_TRAILING_GROUP),
        ("MBChB(Nairobi) extra", DiscardReason.NO_TRAILING_GROUP),
        ("M.Med(Surg(Nairobi))", DiscardReason.NO_TRAILING_GROUP),
        ("A((B)C)(D)", DiscardReason.NESTED_GROUP),
    ],
)
def test_parse_segment_discards_unreadable_fragments(
    fragment: str, reason: DiscardReason
) -> None:
    outcome = parse_segment(fragment, standardizer=STANDARDIZER)

    assert outcome == DiscardedSegment(fragment, reason)


def test_split_and_parse_keeps_fragment_order() -> None:
    parsed = split_and_parse(
        "MBChB(Nairobi) 2005, M.Med(Gen.Surg)(Nairobi) 2010", standardizer=STANDARDIZER
    )

    assert parsed.qualifications == (
        Qualification(year=2005, institution="NAIROBI", degree="MBCHB", speciality=""),
        Qualification(year=2010, institution="NAIROBI", degree="M.MED", speciality="GEN.SURG"),
    )
    assert parsed.discarded == ()


def test_split_and_parse_single_fragment_without_year() -> None:
    parsed = split_and_parse("M.Med(Gen.Surg)(Nairobi)", standardizer=STANDARDIZER)

    assert parsed.qualifications == (
        Qualification(year=0, institution="NAIROBI", degree="M.MED", speciality="GEN.SURG"),
    )


def test_split_and_parse_skips_bad_fragments_without_aborting() -> None:
    parsed = split_and_parse(
        "MBChB(Nairobi) 2005, garbage, A((B)C)(D), BDS(Moi) 2001,", standardizer=STANDARDIZER
    )

    assert [q.degree for q in parsed.qualifications] == ["MBCHB", "BDS"]
    assert [d.reason for d in parsed.discarded] == [
        DiscardReason.NO_TRAILING_GROUP,
        DiscardReason.NESTED_GROUP,
        DiscardReason.EMPTY,
    ]


@pytest.mark.parametrize("raw", ["", "no groups here", ",,,", "((((", "))((", "2" * 5000])
def test_split_and_parse_is_total(raw: str) -> None:
    parsed = split_and_parse(raw, standardizer=STANDARDIZER)

    assert parsed.qualifications == ()


def test_split_and_parse_uses_shipped_synonym_table_by_default() -> None:
    parsed = split_and_parse("MMED(SURG)(Nairobi) 2010")

    assert parsed.qualifications[0].degree == "M.MED"
    assert parsed.qualifications[0].speciality == "SURG"


def test_split_and_parse_survives_oversized_digit_runs() -> None:
    raw = "MBChB(Nairobi) " + "2" * 5000 + ", BDS(Moi) 2001, " + "9" * 5000

    parsed = split_and_parse(raw, standardizer=STANDARDIZER)

    assert [(q.degree, q.year) for q in parsed.qualifications] == [("MBCHB", 0), ("BDS", 2001)]
    assert [d.reason for d in parsed.discarded] == [DiscardReason.EMPTY]
