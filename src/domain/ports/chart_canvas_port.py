"""
Port (interface) for the chart drawing surface.
Infrastructure adapters (e.g. PlotlyChartCanvas) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from src.domain.entities.chart_spec import ChartSpec


class IChartCanvas(ABC):
    @abstractmethod
    def draw(self, spec: ChartSpec) -> None:
        """Draw *spec*, reusing the existing chart instance if there is one."""
        ...

    @property
    @abstractmethod
    def handle(self) -> Optional[Any]:
        """The library-native chart object, or None before the first draw."""
        ...
