"""
Infrastructure adapter: CoinCap REST API → IMarketDataProvider.
All CoinCap-specific details (endpoint, camelCase field names, string-encoded
decimals) are confined here; the rest of the codebase depends only on
IMarketDataProvider and MarketSample.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from src.domain.entities.fetch_result import FetchResult
from src.domain.entities.market_data import MarketSample
from src.domain.ports.market_data_port import IMarketDataProvider

logger = logging.getLogger(__name__)


class _CoinCapAsset(BaseModel):
    id: str
    priceUsd: float
    marketCapUsd: float
    changePercent24Hr: float


class _CoinCapAssetsResponse(BaseModel):
    # Records are validated one by one so a single bad entry only drops its own row.
    data: list[Any]


class CoinCapMarketDataProvider(IMarketDataProvider):
    """Reads current asset quotes from the CoinCap ``/assets`` endpoint."""

    DEFAULT_BASE_URL = "https://api.coincap.io/v2"

    def __init__(self, client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL) -> None:
        self._client = client
        self._assets_url = f"{base_url.rstrip('/')}/assets"

    async def fetch_assets(self, asset_ids: list[str]) -> FetchResult[list[MarketSample]]:
        try:
            response = await self._client.get(
                self._assets_url, params={"ids": ",".join(asset_ids)}
            )
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching market data: %s", exc)
            return FetchResult.failure(f"request failed: {exc}")

        if isinstance(body, dict) and body.get("error"):
            logger.error("Market data provider returned an error: %s", body["error"])
            return FetchResult.failure(f"provider error: {body['error']}")

        try:
            parsed = _CoinCapAssetsResponse.model_validate(body)
        except ValidationError as exc:
            logger.error("Malformed market data response: %s", exc)
            return FetchResult.failure(f"malformed response: {exc.error_count()} errors")

        samples: list[MarketSample] = []
        for raw in parsed.data:
            try:
                record = _CoinCapAsset.model_validate(raw)
            except ValidationError as exc:
                logger.warning("Skipping malformed market record: %s", exc)
                continue
            samples.append(
                MarketSample(
                    id=record.id,
                    price_usd=record.priceUsd,
                    market_cap_usd=record.marketCapUsd,
                    change_percent_24h=record.changePercent24Hr,
                )
            )
        return FetchResult.success(samples)
