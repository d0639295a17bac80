"""
Asset store contract.

The derived components read one snapshot per computation and never write
back. Every mutation (status changes, metadata edits, additions) belongs to
the store.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import List, Optional

from ..exceptions import AssetNotFoundError
from ..types import Asset


class AssetStore(ABC):
    """Abstract base class for asset stores."""

    @abstractmethod
    def get_all_assets(self) -> List[Asset]:
        """Current full snapshot. Callers may not mutate the store through it."""

    @abstractmethod
    def get_asset_by_id(self, asset_id: str) -> Optional[Asset]:
        pass

    def require_asset(self, asset_id: str) -> Asset:
        asset = self.get_asset_by_id(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        return asset

    def snapshot_key(self) -> str:
        return snapshot_hash(self.get_all_assets())

    def __len__(self) -> int:
        return len(self.get_all_assets())


def snapshot_hash(assets: List[Asset]) -> str:
    """Content hash of an ordered asset snapshot."""
    digest = hashlib.sha256()
    for asset in assets:
        digest.update(asset.model_dump_json(by_alias=True).encode("utf-8"))
        digest.update(b"\x00")
    return digest.hexdigest()
