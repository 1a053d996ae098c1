"""
Renderer for the single historical price chart.
Depends only on Domain ports and entities: no plotting library imports.
"""

from typing import Sequence

from src.domain.entities.chart_spec import ChartSpec
from src.domain.entities.market_data import ChartPoint
from src.domain.ports.chart_canvas_port import IChartCanvas


class PriceChartRenderer:
    TITLE = "BTC Price (USD)"

    def __init__(self, canvas: IChartCanvas, title: str = TITLE) -> None:
        self._canvas = canvas
        self._title = title

    def render(self, points: Sequence[ChartPoint]) -> ChartSpec:
        spec = ChartSpec(
            title=self._title,
            labels=[point.label for point in points],
            prices=[point.close for point in points],
        )
        self._canvas.draw(spec)
        return spec
