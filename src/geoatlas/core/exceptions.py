"""
Error taxonomy for geoatlas.

Structurally invalid input raises. Sparse data never does: an empty
collection is the answer to "nothing matched".
"""

from typing import Any, Dict, Optional


class GeoAtlasError(Exception):
    """Base class for all geoatlas errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(GeoAtlasError, ValueError):
    """Malformed configuration: unknown graph mode, facet, dimension, or a scenario without stages."""


class AssetNotFoundError(GeoAtlasError, KeyError):
    """Raised when a caller requires an asset id the store does not hold."""

    def __init__(self, asset_id: str):
        super().__init__(f"Asset not found: {asset_id}", {"asset_id": asset_id})
        self.asset_id = asset_id

    def __str__(self) -> str:
        return self.message


class CatalogLoadError(GeoAtlasError):
    """A catalogue or scenario file could not be read."""
