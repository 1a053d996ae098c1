"""
Use-case: one market cycle, fetch the tracked assets then re-render the list.
Depends only on Domain ports and entities: no infrastructure imports.
"""

import logging
from typing import Optional

from src.application.rendering.list_renderer import MarketListRenderer
from src.domain.entities.asset import tracked_asset_ids
from src.domain.ports.market_data_port import IMarketDataProvider

logger = logging.getLogger(__name__)


class RefreshMarketListUseCase:
    def __init__(
        self,
        provider: IMarketDataProvider,
        renderer: MarketListRenderer,
        asset_ids: Optional[list[str]] = None,
    ) -> None:
        self._provider = provider
        self._renderer = renderer
        self._asset_ids = asset_ids or tracked_asset_ids()

    async def execute(self) -> bool:
        """Run one fetch+render cycle.

        Returns:
            True if the list was re-rendered, False if the fetch failed and the
            previous render was left untouched.
        """
        result = await self._provider.fetch_assets(self._asset_ids)
        if not result.ok:
            logger.debug("Skipping market render this cycle: %s", result.error)
            return False
        rows = self._renderer.render(result.data)
        logger.debug("Rendered %d market rows", len(rows))
        return True
