from __future__ import annotations

from kmpdc_seeder.domain.degrees import DegreeStandardizer, default_standardizer


def test_standardize_maps_known_variants_to_canonical_code() -> None:
    standardizer = default_standardizer()

    assert standardizer.standardize("MMED") == "M.MED"
    assert standardizer.standardize("M.MED(GEN.SURG") == "M.MED"
    assert standardizer.standardize("MMED CHEST &AMP RESP") == "M.MED"
    assert standardizer.standardize("M.MED") == "M.MED"


def test_standardize_returns_unknown_degrees_unchanged() -> None:
    standardizer = default_standardizer()

    assert standardizer.standardize("MBCHB") == "MBCHB"
    assert standardizer.standardize("M.MED (SURG)") == "M.MED (SURG)"
    assert standardizer.standardize("") == ""


def test_standardize_is_exact_match_only() -> None:
    standardizer = DegreeStandardizer({"MMED": "M.MED"})

    assert standardizer.standardize("mmed") == "mmed"
    assert standardizer.standardize(" MMED") == " MMED"
    assert standardizer.standardize("MMED") == standardizer.standardize("MMED") == "M.MED"


def test_standardizer_copies_its_table() -> None:
    table = {"MMED": "M.MED"}
    standardizer = DegreeStandardizer(table)

    table["MBCHB"] = "X"

    assert standardizer.standardize("MBCHB") == "MBCHB"
