"""KMPDC register source configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx
from httpx_retries import Retry

from .env import env_bool, env_float, env_int, env_str

KMPDC_SOURCE_URL = "https://kmpdc.go.ke/Registers/practitioners.php"
KMPDC_DETAIL_BASE_URL = "https://kmpdc.go.ke/Registers/"
KMPDC_USER_AGENT = "Mozilla/5.0 (compatible; KmpdcSeeder/1.0)"
KMPDC_TIMEOUT_SECONDS = 300.0
KMPDC_MAX_RETRIES = 3


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    total: int = KMPDC_MAX_RETRIES
    backoff_factor: float = 1.0
    max_backoff_wait: float = 60.0
    respect_retry_after_header: bool = True
    status_forcelist: frozenset[int] = field(
        default_factory=lambda: frozenset({429, 500, 502, 503, 504})
    )
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.TimeoutException,
        httpx.NetworkError,
        httpx.RemoteProtocolError,
    )

    def build(self) -> Retry:
        return Retry(
            total=self.total,
            backoff_factor=self.backoff_factor,
            max_backoff_wait=self.max_backoff_wait,
            respect_retry_after_header=self.respect_retry_after_header,
            allowed_methods=("GET", "HEAD"),
            status_forcelist=tuple(self.status_forcelist),
            retry_on_exceptions=self.retry_on_exceptions,
        )


@dataclass(slots=True, frozen=True)
class RegistryConfig:
    """Holds the register URL and HTTP client settings."""

    source_url: str = KMPDC_SOURCE_URL
    detail_base_url: str = KMPDC_DETAIL_BASE_URL
    timeout_seconds: float = KMPDC_TIMEOUT_SECONDS
    user_agent: str = KMPDC_USER_AGENT
    verify_ssl: bool = True
    retry: RetryPolicy = field(default_factory=RetryPolicy)


def get_registry_config() -> RegistryConfig:
    return RegistryConfig(
        source_url=env_str("KMPDC_SOURCE_URL", KMPDC_SOURCE_URL),
        timeout_seconds=env_float("KMPDC_REQUEST_TIMEOUT", KMPDC_TIMEOUT_SECONDS),
        user_agent=env_str("KMPDC_USER_AGENT", KMPDC_USER_AGENT),
        verify_ssl=env_bool("KMPDC_VERIFY_SSL", default=True),
        retry=RetryPolicy(total=env_int("KMPDC_MAX_RETRIES", KMPDC_MAX_RETRIES)),
    )
