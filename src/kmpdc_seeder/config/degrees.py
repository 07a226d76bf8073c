"""Loader for the degree synonym table."""

from __future__ import annotations

import os
import tomllib
from importlib import resources
from pathlib import Path
from typing import Final, cast

from .errors import ConfigurationError

DEGREE_SYNONYMS_ENV: Final[str] = "KMPDC_DEGREE_SYNONYMS_PATH"
_DEFAULT_RESOURCE: Final[str] = "data/degree_synonyms.toml"


def load_degree_synonyms(path: Path | str | None = None) -> dict[str, str]:
    """Return a ``variant -> canonical`` mapping read from a TOML synonym table.

    The table has a single ``[synonyms]`` section whose keys are canonical degree
    codes and whose values are lists of variant spellings. Without an explicit
    ``path`` the ``KMPDC_DEGREE_SYNONYMS_PATH`` override is consulted before the
    table shipped with the package.
    """

    document = _read_document(path or os.getenv(DEGREE_SYNONYMS_ENV) or None)
    section = document.get("synonyms")
    if not isinstance(section, dict):
        raise ConfigurationError("Degree synonym table needs a [synonyms] section")

    mapping: dict[str, str] = {}
    for canonical, variants in cast(dict[str, object], section).items():
        if not isinstance(variants, list):
            raise ConfigurationError(f"Synonyms for {canonical!r} must be a list of strings")
        for variant in cast(list[object], variants):
            if not isinstance(variant, str):
                raise ConfigurationError(f"Synonyms for {canonical!r} must be a list of strings")
            existing = mapping.get(variant)
            if existing is not None and existing != canonical:
                raise ConfigurationError(
                    f"Variant {variant!r} maps to both {existing!r} and {canonical!r}"
                )
            mapping[variant] = canonical
    return mapping


def _read_document(path: Path | str | None) -> dict[str, object]:
    try:
        if path is None:
            resource = resources.files(__package__).joinpath(_DEFAULT_RESOURCE)
            return tomllib.loads(resource.read_text(encoding="utf-8"))
        with Path(path).open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Degree synonym table not found: {path}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Degree synonym table cannot be read: {path}: {exc}") from exc
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Invalid degree synonym table: {exc}") from exc
