"""Record normalization: raw register rows to practitioner records and reference sets."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .qualifications import split_and_parse
from .reference_sets import ReferenceSetCollector
from .types import PractitionerRecord, RegistryExtraction

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .degrees import DegreeStandardizer
    from .types import RawRow

DEFAULT_PROGRESS_EVERY = 200

log = getLogger(__name__)


def normalize_registry(
    rows: Iterable[RawRow],
    *,
    collector: ReferenceSetCollector | None = None,
    standardizer: DegreeStandardizer | None = None,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
) -> RegistryExtraction:
    """Fold ``rows`` into practitioner records and finalized reference sets.

    Rows are consumed lazily in order, so a caller can stop a run by ending the
    iterable. A fresh collector is used unless one is injected.
    """

    references = collector if collector is not None else ReferenceSetCollector()
    practitioners: list[PractitionerRecord] = []
    qualifications_parsed = 0
    fragments_discarded = 0

    for row in rows:
        parsed = split_and_parse(row.qualifications, standardizer=standardizer)
        qualifications_parsed += len(parsed.qualifications)
        fragments_discarded += len(parsed.discarded)

        references.observe_speciality(row.speciality)
        references.observe_sub_speciality(row.speciality, row.sub_speciality)
        references.observe_status(row.status)
        references.observe_address(row.address)
        for qualification in parsed.qualifications:
            references.observe_degree(qualification.degree)
            references.observe_institution(qualification.institution)

        practitioners.append(
            PractitionerRecord(
                full_name=row.full_name,
                registration_number=row.registration_number,
                address=row.address,
                discipline=row.discipline,
                speciality=row.speciality,
                sub_speciality=row.sub_speciality,
                status=row.status,
                qualifications=parsed.qualifications,
            )
        )

        if progress_every > 0 and len(practitioners) % progress_every == 0:
            log.info("Processed %s practitioners", len(practitioners))

    log.info(
        "Normalized %s practitioners: qualifications=%s, discarded_fragments=%s",
        len(practitioners),
        qualifications_parsed,
        fragments_discarded,
    )

    return RegistryExtraction(
        practitioners=tuple(practitioners),
        reference_sets=references.finalize(),
        rows_processed=len(practitioners),
        qualifications_parsed=qualifications_parsed,
        fragments_discarded=fragments_discarded,
    )
