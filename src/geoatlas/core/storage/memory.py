"""
In-memory asset store.

Fast ephemeral storage for tests, demos, and embedding applications that
own their asset list.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..exceptions import AssetNotFoundError, InvalidArgumentError
from ..types import Asset
from .base import AssetStore

logger = logging.getLogger(__name__)


class MemoryAssetStore(AssetStore):
    """Insertion-ordered dictionary of assets keyed by id."""

    def __init__(self, assets: Optional[Iterable[Asset]] = None):
        self._assets: Dict[str, Asset] = {}
        if assets:
            self.add_many(assets)

    def get_all_assets(self) -> List[Asset]:
        # Assets are frozen models, a shallow list copy is a stable snapshot
        return list(self._assets.values())

    def get_asset_by_id(self, asset_id: str) -> Optional[Asset]:
        return self._assets.get(asset_id)

    def add(self, asset: Asset) -> None:
        if asset.id in self._assets:
            raise InvalidArgumentError(f"Duplicate asset id: {asset.id}", {"asset_id": asset.id})
        self._assets[asset.id] = asset

    def add_many(self, assets: Iterable[Asset]) -> int:
        count = 0
        for asset in assets:
            self.add(asset)
            count += 1
        return count

    def update(self, asset: Asset) -> None:
        """Replace an existing asset, keeping its position in the snapshot."""
        if asset.id not in self._assets:
            raise AssetNotFoundError(asset.id)
        self._assets[asset.id] = asset

    def remove(self, asset_id: str) -> bool:
        return self._assets.pop(asset_id, None) is not None

    def clear(self) -> None:
        self._assets.clear()
