"""Translate the KMPDC practitioners register HTML into raw rows."""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING, Final
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from kmpdc_seeder.config.registry import KMPDC_DETAIL_BASE_URL
from kmpdc_seeder.domain.ports.fetching import RawRowFetchResult

from .schema import RawRowPayload

if TYPE_CHECKING:
    from bs4.element import Tag

log = getLogger(__name__)

_CLIENT_ID_RE: Final[re.Pattern[str]] = re.compile(r"client_id=(\d+)")
_EXPECTED_CELLS: Final[int] = 9


class RegisterMarkupError(ValueError):
    """Raised when the register page does not contain a practitioners table."""


def parse_register_html(
    html: str,
    *,
    base_url: str = KMPDC_DETAIL_BASE_URL,
) -> RawRowFetchResult:
    """Read every practitioner row of the register table.

    Column order on the page: name, registration, address, qualifications,
    discipline, speciality, sub-speciality, status, detail link. The
    registration number is taken from the ``client_id`` query value of the
    detail link; the registration column itself is not reliable.
    """

    soup = BeautifulSoup(html, "html.parser")
    table_rows = soup.select("table tr")
    if not table_rows:
        raise RegisterMarkupError("No table rows found in register page")

    rows: list[RawRowPayload] = []
    skipped = 0
    for index, table_row in enumerate(table_rows):
        if index == 0:
            continue
        cells = table_row.find_all("td")
        if not cells:
            continue
        if len(cells) < _EXPECTED_CELLS:
            log.warning("Skipping register row %s with %s cells", index, len(cells))
            skipped += 1
            continue
        rows.append(_translate_row(cells, base_url=base_url))

    log.debug("Translated %s register rows (skipped=%s)", len(rows), skipped)
    return RawRowFetchResult(rows=[row.to_domain() for row in rows], skipped=skipped)


def _translate_row(cells: list[Tag], *, base_url: str) -> RawRowPayload:
    def text(position: int) -> str:
        return cells[position].get_text().strip()

    link = cells[8].find("a")
    href = link.get("href") if link is not None else None
    view_link = href if isinstance(href, str) and href else ""
    client_id = _CLIENT_ID_RE.search(view_link)

    return RawRowPayload(
        full_name=text(0),
        registration_number=client_id.group(1) if client_id else "",
        address=text(2),
        qualifications=text(3),
        discipline=text(4),
        speciality=text(5),
        sub_speciality=text(6),
        status=text(7),
        view_url=urljoin(base_url, view_link) if view_link else "",
    )
