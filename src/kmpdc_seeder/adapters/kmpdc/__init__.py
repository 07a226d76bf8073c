"""Public interface for the KMPDC register adapter."""

from __future__ import annotations

from .client import KmpdcRegisterFetcher, RegistryFetchError
from .schema import RawRowPayload
from .translator import RegisterMarkupError, parse_register_html

__all__ = [
    "KmpdcRegisterFetcher",
    "RawRowPayload",
    "RegisterMarkupError",
    "RegistryFetchError",
    "parse_register_html",
]
