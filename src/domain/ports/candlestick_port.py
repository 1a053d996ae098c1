"""
Port (interface) for candlestick (kline) data providers.
Infrastructure adapters (e.g. BinanceCandlestickProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.fetch_result import FetchResult
from src.domain.entities.market_data import ChartPoint


class ICandlestickProvider(ABC):
    @abstractmethod
    async def fetch_daily_closes(
        self,
        symbol: str = "BTCUSDT",
        interval: str = "1d",
        limit: int = 7,
    ) -> FetchResult[list[ChartPoint]]:
        """Read *limit* candles and keep only (open day, close price) per candle.

        Never raises: any failure is logged and returned as FetchResult.failure.
        """
        ...
