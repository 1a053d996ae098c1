"""Tests for the CoinCap market data adapter"""

import httpx
import pytest

from src.domain.entities.market_data import MarketSample
from src.infrastructure.market_data.coincap_adapter import CoinCapMarketDataProvider

BITCOIN = {
    "id": "bitcoin",
    "rank": "1",
    "symbol": "BTC",
    "priceUsd": "67890.12",
    "marketCapUsd": "1234000000000",
    "changePercent24Hr": "2.5",
}
DOGECOIN = {
    "id": "dogecoin",
    "priceUsd": "0.1234",
    "marketCapUsd": "17800000000",
    "changePercent24Hr": "-3.456",
}


def _provider(handler) -> CoinCapMarketDataProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CoinCapMarketDataProvider(client, base_url="https://coincap.test/v2/")


@pytest.mark.asyncio
async def test_parses_assets_in_provider_order():
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": [DOGECOIN, BITCOIN], "timestamp": 1})

    result = await _provider(handler).fetch_assets(["bitcoin", "dogecoin"])

    assert result.ok
    assert result.data == [
        MarketSample(id="dogecoin", price_usd=0.1234, market_cap_usd=17.8e9, change_percent_24h=-3.456),
        MarketSample(id="bitcoin", price_usd=67890.12, market_cap_usd=1.234e12, change_percent_24h=2.5),
    ]
    (request,) = seen
    assert request.method == "GET"
    assert request.url.path == "/v2/assets"
    assert request.url.params["ids"] == "bitcoin,dogecoin"


@pytest.mark.asyncio
async def test_network_error_is_a_logged_failure(caplog):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = await _provider(handler).fetch_assets(["bitcoin"])

    assert not result.ok
    assert result.data is None
    assert "Error fetching market data" in caplog.text


@pytest.mark.asyncio
async def test_non_json_body_is_a_failure():
    result = await _provider(
        lambda request: httpx.Response(200, text="<html>maintenance</html>")
    ).fetch_assets(["bitcoin"])

    assert not result.ok


@pytest.mark.asyncio
async def test_http_error_status_is_a_failure():
    result = await _provider(
        lambda request: httpx.Response(503, json={"error": "unavailable"})
    ).fetch_assets(["bitcoin"])

    assert not result.ok


@pytest.mark.asyncio
async def test_provider_error_body_is_a_failure():
    result = await _provider(
        lambda request: httpx.Response(200, json={"error": "bad ids"})
    ).fetch_assets(["bitcoin"])

    assert not result.ok
    assert "bad ids" in result.error


@pytest.mark.asyncio
async def test_malformed_record_is_skipped_and_others_kept(caplog):
    broken = dict(BITCOIN, marketCapUsd=None)
    result = await _provider(
        lambda request: httpx.Response(200, json={"data": [broken, DOGECOIN, "junk"]})
    ).fetch_assets(["bitcoin", "dogecoin"])

    assert result.ok
    assert [sample.id for sample in result.data] == ["dogecoin"]
    assert "Skipping malformed market record" in caplog.text


@pytest.mark.asyncio
async def test_missing_data_array_is_a_failure():
    result = await _provider(
        lambda request: httpx.Response(200, json={"timestamp": 1})
    ).fetch_assets(["bitcoin"])

    assert not result.ok
    assert result.error.startswith("malformed response")
