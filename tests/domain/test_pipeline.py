from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kmpdc_seeder.domain.pipeline import normalize_registry
from kmpdc_seeder.domain.reference_sets import ReferenceSetCollector
from kmpdc_seeder.domain.types import Qualification, RawRow
from tests.helpers.registry import make_raw_row

if TYPE_CHECKING:
    from collections.abc import Iterator

    import pytest


def _rows() -> list[RawRow]:
    return [
        make_raw_row("1001"),
        make_raw_row(
            "1002",
            full_name="Dr. Otieno Ouma",
            address="P.O. Box 2, Kisumu",
            qualifications="MBChB(Moi) 2012, M.Med(Obs&ampGynae)(Nairobi) 2018",
            speciality="Obstetrics & Gynaecology",
            sub_speciality="Reproductive Health",
        ),
        make_raw_row("1003", qualifications="", speciality="", status="", address=""),
    ]


def test_normalize_registry_builds_records_in_row_order() -> None:
    extraction = normalize_registry(_rows())

    assert [record.registration_number for record in extraction.practitioners] == [
        "1001",
        "1002",
        "1003",
    ]
    assert extraction.practitioners[0].qualifications == (
        Qualification(year=2005, institution="NAIROBI", degree="MBCHB", speciality=""),
        Qualification(year=2010, institution="NAIROBI", degree="M.MED", speciality="GEN.SURG"),
    )
    assert extraction.practitioners[1].qualifications[1].speciality == "OBS & GYNAE"
    assert extraction.rows_processed == 3
    assert extraction.qualifications_parsed == 4


def test_normalize_registry_keeps_rows_with_empty_qualifications() -> None:
    extraction = normalize_registry([make_raw_row("1003", qualifications="")])

    record = extraction.practitioners[0]
    assert record.qualifications == ()
    assert record.full_name == "Dr. Jane Wanjiku"
    assert record.speciality == "Surgery"
    assert record.status == "Active"


def test_normalize_registry_copies_scalar_fields_verbatim() -> None:
    row = RawRow(
        full_name="  Dr.  Spaced ",
        registration_number=" 77 ",
        address=" Box 9 ",
        qualifications="garbage",
        speciality=" Surgery",
        status="Active ",
    )

    record = normalize_registry([row]).practitioners[0]

    assert record.full_name == "  Dr.  Spaced "
    assert record.registration_number == " 77 "
    assert record.address == " Box 9 "
    assert record.qualifications == ()


def test_normalize_registry_collects_reference_sets() -> None:
    references = normalize_registry(_rows()).reference_sets

    assert references.degrees == ("M.MED", "MBCHB")
    assert references.institutions == ("MOI", "NAIROBI")
    assert references.specialities == ("Obstetrics & Gynaecology", "Surgery")
    assert dict(references.sub_specialities) == {
        "Obstetrics & Gynaecology": ("Reproductive Health",),
    }
    assert references.statuses == ("Active",)
    assert references.addresses == ("P.O. Box 1, Nairobi", "P.O. Box 2, Kisumu")


def test_normalize_registry_counts_discarded_fragments() -> None:
    extraction = normalize_registry(
        [make_raw_row("1001", qualifications="MBChB(Nairobi) 2005, A((B)C)(D), bare, ")]
    )

    assert extraction.qualifications_parsed == 1
    assert extraction.fragments_discarded == 3


def test_normalize_registry_is_deterministic_across_runs() -> None:
    first = normalize_registry(_rows())
    second = normalize_registry(list(reversed(_rows())))

    assert first.reference_sets == second.reference_sets


def test_normalize_registry_starts_with_fresh_reference_sets() -> None:
    normalize_registry(_rows())

    extraction = normalize_registry([make_raw_row("2001", qualifications="BDS(Moi) 2001")])

    assert extraction.reference_sets.degrees == ("BDS",)


def test_normalize_registry_uses_injected_collector() -> None:
    collector = ReferenceSetCollector()
    collector.observe_degree("PHD")

    extraction = normalize_registry(_rows(), collector=collector)

    assert "PHD" in extraction.reference_sets.degrees
    assert "MBCHB" in collector.degrees


def test_normalize_registry_consumes_rows_lazily() -> None:
    consumed: list[str] = []

    def rows() -> Iterator[RawRow]:
        for row in _rows():
            consumed.append(row.registration_number)
            yield row

    extraction = normalize_registry(rows())

    assert consumed == ["1001", "1002", "1003"]
    assert extraction.rows_processed == 3


def test_normalize_registry_logs_progress(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="kmpdc_seeder.domain.pipeline")

    normalize_registry(_rows(), progress_every=2)

    messages = [record.getMessage() for record in caplog.records]
    assert "Processed 2 practitioners" in messages
    assert any(message.startswith("Normalized 3 practitioners") for message in messages)
