"""
Renderer for the market list.
Depends only on Domain ports, entities and formatting: no infrastructure imports.

Each render is stateless: the whole list is rebuilt from the samples and
replaces whatever the surface showed before, so row identity is not kept
across cycles.
"""

from datetime import datetime
from typing import Callable, Iterable, Optional

from src.domain.entities.asset import AssetMetadata, find_asset
from src.domain.entities.market_data import CoinRow, MarketSample
from src.domain.formatting import (
    format_change,
    format_market_cap,
    format_price,
    format_timestamp,
)
from src.domain.ports.dashboard_surface_port import IListSurface

AssetLookup = Callable[[str], Optional[AssetMetadata]]


def build_rows(
    samples: Iterable[MarketSample],
    lookup: AssetLookup = find_asset,
) -> list[CoinRow]:
    """Compose one CoinRow per sample, in the order given.

    Samples whose id has no metadata entry are skipped without error.
    """
    rows: list[CoinRow] = []
    for sample in samples:
        asset = lookup(sample.id)
        if asset is None:
            continue
        change_text, change_class = format_change(sample.change_percent_24h)
        rows.append(
            CoinRow(
                icon=asset.icon,
                icon_class=asset.icon_class,
                name=asset.name,
                market_cap=format_market_cap(sample.market_cap_usd),
                price=format_price(sample.price_usd),
                change=change_text,
                change_class=change_class,
            )
        )
    return rows


class MarketListRenderer:
    def __init__(
        self,
        surface: IListSurface,
        lookup: AssetLookup = find_asset,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Args:
            surface: IListSurface that hosts the rows and the timestamp.
            lookup:  Asset metadata lookup by id.
            clock:   Returns the current local time (injected for tests).
        """
        self._surface = surface
        self._lookup = lookup
        self._clock = clock

    def render(self, samples: Iterable[MarketSample]) -> list[CoinRow]:
        rows = build_rows(samples, self._lookup)
        self._surface.replace_rows(rows)
        self._surface.set_timestamp(format_timestamp(self._clock()))
        return rows
