"""
Port (interface) for current market data providers.
Infrastructure adapters (e.g. CoinCapMarketDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.fetch_result import FetchResult
from src.domain.entities.market_data import MarketSample


class IMarketDataProvider(ABC):
    @abstractmethod
    async def fetch_assets(self, asset_ids: list[str]) -> FetchResult[list[MarketSample]]:
        """Read price, market cap and 24h change for exactly *asset_ids*.

        Never raises: any failure is logged and returned as FetchResult.failure.
        Samples keep the order the provider returned them in.
        """
        ...
