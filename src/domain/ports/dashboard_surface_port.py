"""
Port (interface) for the surface hosting the market list and its timestamp.
Infrastructure adapters (e.g. DashboardSurface) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.market_data import CoinRow


class IListSurface(ABC):
    @abstractmethod
    def replace_rows(self, rows: list[CoinRow]) -> None:
        """Discard every current row and show *rows* instead."""
        ...

    @abstractmethod
    def set_timestamp(self, text: str) -> None:
        ...
