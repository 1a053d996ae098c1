"""
Infrastructure adapter: Binance klines endpoint → ICandlestickProvider.

Binance returns each candle as a positional array:
    [open_time_ms, open, high, low, close, volume, close_time_ms, ...]
Only index 0 (open time) and index 4 (close) are kept.
"""

import logging
from datetime import datetime

import httpx

from src.domain.entities.fetch_result import FetchResult
from src.domain.entities.market_data import ChartPoint
from src.domain.ports.candlestick_port import ICandlestickProvider

logger = logging.getLogger(__name__)

_OPEN_TIME = 0
_CLOSE = 4


class BinanceCandlestickProvider(ICandlestickProvider):
    """Reads daily candles from the public Binance spot API."""

    DEFAULT_BASE_URL = "https://api.binance.com"

    def __init__(self, client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL) -> None:
        self._client = client
        self._klines_url = f"{base_url.rstrip('/')}/api/v3/klines"

    async def fetch_daily_closes(
        self,
        symbol: str = "BTCUSDT",
        interval: str = "1d",
        limit: int = 7,
    ) -> FetchResult[list[ChartPoint]]:
        try:
            response = await self._client.get(
                self._klines_url,
                params={"symbol": symbol, "interval": interval, "limit": limit},
            )
            response.raise_for_status()
            rows = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Chart error: %s", exc)
            return FetchResult.failure(f"request failed: {exc}")

        if not isinstance(rows, list):
            logger.error("Chart error: expected a list of klines, got %s", type(rows).__name__)
            return FetchResult.failure("unexpected response shape")

        try:
            points = [self._to_point(row) for row in rows]
        except (LookupError, TypeError, ValueError, OverflowError, OSError) as exc:
            logger.error("Chart error: malformed kline row: %s", exc)
            return FetchResult.failure(f"malformed kline row: {exc}")

        return FetchResult.success(points)

    @staticmethod
    def _to_point(row: list) -> ChartPoint:
        opened = datetime.fromtimestamp(int(row[_OPEN_TIME]) / 1000)
        return ChartPoint(day=opened.date(), close=float(row[_CLOSE]))
