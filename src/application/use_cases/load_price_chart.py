"""
Use-case: fetch the daily candles of one trading pair and draw the chart.
Depends only on Domain ports and entities: no infrastructure imports.
"""

import logging

from src.application.rendering.chart_renderer import PriceChartRenderer
from src.domain.ports.candlestick_port import ICandlestickProvider

logger = logging.getLogger(__name__)


class LoadPriceChartUseCase:
    SYMBOL: str = "BTCUSDT"
    INTERVAL: str = "1d"
    LIMIT: int = 7

    def __init__(self, provider: ICandlestickProvider, renderer: PriceChartRenderer) -> None:
        self._provider = provider
        self._renderer = renderer

    async def execute(self) -> bool:
        """Fetch the series and draw it. A failed fetch aborts the draw entirely."""
        result = await self._provider.fetch_daily_closes(
            self.SYMBOL, interval=self.INTERVAL, limit=self.LIMIT
        )
        if not result.ok:
            logger.debug("Chart not drawn: %s", result.error)
            return False
        self._renderer.render(result.data)
        logger.info("Drew %s chart with %d points", self.SYMBOL, len(result.data))
        return True
