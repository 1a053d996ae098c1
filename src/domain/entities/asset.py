"""
Domain entity for the static table of tracked assets.
Zero external dependencies: pure Python dataclass only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AssetMetadata:
    id: str
    symbol: str
    name: str
    icon: str
    icon_class: str


TRACKED_ASSETS: tuple[AssetMetadata, ...] = (
    AssetMetadata(id="bitcoin", symbol="BTC", name="BTC", icon="₿", icon_class="icon-btc"),
    AssetMetadata(id="ethereum", symbol="ETH", name="ETH", icon="Ξ", icon_class="icon-eth"),
    AssetMetadata(id="binancecoin", symbol="BNB", name="BNB", icon="BNB", icon_class="icon-bnb"),
    AssetMetadata(id="ripple", symbol="XRP", name="XRP", icon="XRP", icon_class="icon-xrp"),
    AssetMetadata(id="dogecoin", symbol="DOGE", name="DOGE", icon="Ð", icon_class="icon-doge"),
    AssetMetadata(id="tether", symbol="USDT", name="USDT", icon="₮", icon_class="icon-usdt"),
    AssetMetadata(id="usd-coin", symbol="USDC", name="USDC", icon="₵", icon_class="icon-usdc"),
)

_ASSETS_BY_ID = {asset.id: asset for asset in TRACKED_ASSETS}


def tracked_asset_ids() -> list[str]:
    """Identifiers of every tracked asset, in table order."""
    return [asset.id for asset in TRACKED_ASSETS]


def find_asset(asset_id: str) -> Optional[AssetMetadata]:
    return _ASSETS_BY_ID.get(asset_id)
