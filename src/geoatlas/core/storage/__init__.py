"""
Asset stores for geoatlas.

Provides pluggable snapshot sources:
- MemoryAssetStore: Fast ephemeral storage for testing and embedding
- JsonAssetStore: Read-only catalogue export
- SQLiteAssetStore: Local persistence
"""

from .base import AssetStore, snapshot_hash
from .json_file import JsonAssetStore, parse_assets, write_assets
from .memory import MemoryAssetStore
from .sqlite import SQLiteAssetStore

__all__ = [
    "AssetStore",
    "JsonAssetStore",
    "MemoryAssetStore",
    "SQLiteAssetStore",
    "parse_assets",
    "snapshot_hash",
    "write_assets",
]
