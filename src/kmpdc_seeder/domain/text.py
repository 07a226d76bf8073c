"""Canonicalization of free-text register values."""

from __future__ import annotations

import re
from typing import Final

# "&amp;" before "&amp" so the longer artifact never leaves a stray ";".
_ENTITY_ARTIFACTS: Final[tuple[str, ...]] = ("&amp;", "&amp")
_ESCAPED_SLASH: Final[str] = "\\/"
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")


def normalize_entity_value(text: str) -> str:
    """Decode textual HTML-entity artifacts and collapse whitespace.

    ``"Obs&ampGynae"`` becomes ``"Obs & Gynae"``. Case is left untouched; callers
    upper-case values where the canonical form requires it.
    """

    for artifact in _ENTITY_ARTIFACTS:
        text = text.replace(artifact, " & ")
    text = text.replace(_ESCAPED_SLASH, " & ")
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
