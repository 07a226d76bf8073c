from __future__ import annotations

from collections.abc import Callable  # noqa: TC003

import httpx
import pytest

from kmpdc_seeder.adapters.kmpdc import KmpdcRegisterFetcher, RegistryFetchError
from kmpdc_seeder.config.registry import RegistryConfig


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[RegistryConfig], httpx.Client]:
    def factory(config: RegistryConfig) -> httpx.Client:
        return httpx.Client(
            headers={"User-Agent": config.user_agent},
            transport=httpx.MockTransport(handler),
        )

    return factory


def test_fetcher_returns_rows_from_register_page(register_html: str) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text=register_html)

    config = RegistryConfig(source_url="https://register.example/practitioners.php")
    fetcher = KmpdcRegisterFetcher(config=config, client_factory=_make_client_factory(handler))

    result = fetcher()

    assert len(result.rows) == 3
    assert result.skipped == 1
    assert str(requests[0].url) == "https://register.example/practitioners.php"
    assert requests[0].headers["User-Agent"] == config.user_agent


def test_fetcher_raises_for_error_status() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    fetcher = KmpdcRegisterFetcher(
        config=RegistryConfig(), client_factory=_make_client_factory(handler)
    )

    with pytest.raises(RegistryFetchError) as excinfo:
        fetcher()

    assert excinfo.value.status_code == 500


def test_fetcher_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    fetcher = KmpdcRegisterFetcher(
        config=RegistryConfig(), client_factory=_make_client_factory(handler)
    )

    with pytest.raises(RegistryFetchError) as excinfo:
        fetcher()

    assert excinfo.value.status_code is None


def test_fetcher_raises_when_page_has_no_table() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html><body>Down for maintenance</body></html>")

    fetcher = KmpdcRegisterFetcher(
        config=RegistryConfig(), client_factory=_make_client_factory(handler)
    )

    with pytest.raises(RegistryFetchError, match="No table rows"):
        fetcher()
