"""
Read-only asset store backed by a JSON catalogue export.

Accepts either a top-level array of assets or ``{"assets": [...]}``, in the
camelCase shape the catalogue front end produces.
"""

import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from ..exceptions import CatalogLoadError, InvalidArgumentError
from ..types import Asset
from .memory import MemoryAssetStore

logger = logging.getLogger(__name__)


def parse_assets(data: Any, origin: str = "<memory>") -> List[Asset]:
    """
    Validate raw catalogue data into Asset models.

    Raises:
        InvalidArgumentError: If the document shape or any asset is invalid.
    """
    if isinstance(data, dict):
        data = data.get("assets")
    if not isinstance(data, list):
        raise InvalidArgumentError(f"Catalogue must be a list of assets: {origin}")

    assets = []
    for position, raw in enumerate(data):
        try:
            assets.append(Asset.model_validate(raw))
        except ValidationError as e:
            raise InvalidArgumentError(
                f"Invalid asset at position {position} in {origin}",
                {"errors": e.errors(include_url=False)},
            ) from e
    return assets


class JsonAssetStore(MemoryAssetStore):
    """Loads assets from a JSON file; ``reload()`` re-reads it."""

    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)
        self.reload()

    def reload(self) -> int:
        if not self.path.exists():
            raise CatalogLoadError(f"Catalogue not found: {self.path}", {"path": str(self.path)})

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"Failed to read catalogue {self.path}: {e}") from e

        assets = parse_assets(data, str(self.path))
        self.clear()
        self.add_many(assets)
        logger.info("Loaded %d assets from %s", len(assets), self.path)
        return len(assets)


def write_assets(assets: List[Asset], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [a.model_dump(mode="json", by_alias=True, exclude_none=True) for a in assets]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return path

