"""
Domain entities for market and chart data.
Zero external dependencies: pure Python dataclasses only.

Both entities are transient: produced by a fetch, consumed by one render,
then discarded.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class MarketSample:
    id: str
    price_usd: float
    market_cap_usd: float
    change_percent_24h: float


@dataclass(frozen=True)
class ChartPoint:
    day: date
    close: float

    @property
    def label(self) -> str:
        """Day/month axis label without zero padding, e.g. '7/3'."""
        return f"{self.day.day}/{self.day.month}"


@dataclass(frozen=True)
class CoinRow:
    """One fully formatted line of the market list."""

    icon: str
    icon_class: str
    name: str
    market_cap: str
    price: str
    change: str
    change_class: str
