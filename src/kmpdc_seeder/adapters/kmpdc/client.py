"""HTTP client for the KMPDC practitioners register."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from httpx_retries import RetryTransport

from kmpdc_seeder.config.registry import RegistryConfig, get_registry_config

from .translator import RegisterMarkupError, parse_register_html

if TYPE_CHECKING:
    from collections.abc import Callable

    from kmpdc_seeder.domain.ports.fetching import RawRowFetcher, RawRowFetchResult

log = getLogger(__name__)


class RegistryFetchError(RuntimeError):
    """Raised when the register page cannot be fetched or read."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _default_client_factory(config: RegistryConfig) -> httpx.Client:
    return httpx.Client(
        timeout=config.timeout_seconds,
        verify=config.verify_ssl,
        headers={"User-Agent": config.user_agent},
        follow_redirects=True,
        transport=RetryTransport(retry=config.retry.build()),
    )


@dataclass(slots=True)
class KmpdcRegisterFetcher:
    config: RegistryConfig = field(default_factory=get_registry_config)
    client_factory: Callable[[RegistryConfig], httpx.Client] = field(
        default=_default_client_factory
    )

    def __call__(self) -> RawRowFetchResult:
        log.info("Fetching register from %s", self.config.source_url)
        try:
            with self.client_factory(self.config) as client:
                response = client.get(self.config.source_url)
        except httpx.HTTPError as exc:
            raise RegistryFetchError(f"Failed to fetch register: {exc}") from exc

        if not response.is_success:
            raise RegistryFetchError(
                f"Failed to fetch register page: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = parse_register_html(response.text, base_url=self.config.detail_base_url)
        except RegisterMarkupError as exc:
            raise RegistryFetchError(str(exc)) from exc

        log.info("Fetched %s register rows (skipped=%s)", len(result.rows), result.skipped)
        return result


if TYPE_CHECKING:
    _fetcher_check: RawRowFetcher = KmpdcRegisterFetcher()
