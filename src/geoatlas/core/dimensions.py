"""
Dimension index over the 5D semantic coordinates.

For every dimension key the index holds the distinct mounted values in
first-seen order, and for every (key, value) pair the assets carrying it.
Assets without coordinates or with an empty value on an axis contribute
nothing to that axis.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..config import DIMENSION_ORDER
from .exceptions import InvalidArgumentError
from .types import Asset, Dimension

logger = logging.getLogger(__name__)


def resolve_dimensions(dimension_keys: Optional[Iterable[object]]) -> Tuple[Dimension, ...]:
    """
    Validate caller-supplied dimension keys.

    Raises:
        InvalidArgumentError: For non-string or unknown keys.
    """
    if dimension_keys is None:
        return DIMENSION_ORDER

    resolved = []
    for key in dimension_keys:
        if not isinstance(key, str):
            raise InvalidArgumentError(
                f"Dimension keys must be strings, got {type(key).__name__}",
                {"key": repr(key)},
            )
        try:
            dimension = Dimension(key)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown dimension key: {key}",
                {"key": key, "allowed": [d.value for d in Dimension]},
            ) from None
        if dimension not in resolved:
            resolved.append(dimension)
    return tuple(resolved)


class DimensionIndex:
    """
    Lazily built lookup of dimension values and value -> assets.

    Each dimension is materialised on first access, then reused.
    """

    def __init__(self, assets: Sequence[Asset], dimensions: Sequence[Dimension] = DIMENSION_ORDER):
        self._assets: Tuple[Asset, ...] = tuple(assets)
        self._dimensions: Tuple[Dimension, ...] = tuple(dimensions)
        self._buckets: Dict[Dimension, Dict[str, List[Asset]]] = {}

    @property
    def dimensions(self) -> Tuple[Dimension, ...]:
        return self._dimensions

    def _bucket(self, dimension: Dimension) -> Dict[str, List[Asset]]:
        if dimension not in self._dimensions:
            raise InvalidArgumentError(f"Dimension not indexed: {dimension}")

        bucket = self._buckets.get(dimension)
        if bucket is None:
            # dicts keep insertion order, which gives first-seen value order
            bucket = {}
            for asset in self._assets:
                value = asset.dimension_value(dimension)
                if value:
                    bucket.setdefault(value, []).append(asset)
            self._buckets[dimension] = bucket
            logger.debug("Indexed %s: %d distinct values", dimension, len(bucket))
        return bucket

    def iter_values(self, dimension: Dimension) -> Iterator[str]:
        return iter(self._bucket(dimension))

    def values(self, dimension: Dimension) -> List[str]:
        return list(self._bucket(dimension))

    def assets_for(self, dimension: Dimension, value: str) -> List[Asset]:
        return list(self._bucket(dimension).get(value, []))

    def value_counts(self, dimension: Dimension) -> Dict[str, int]:
        return {value: len(assets) for value, assets in self._bucket(dimension).items()}

    def as_dict(self) -> Dict[str, Dict[str, List[str]]]:
        """Plain mapping dimension -> value -> asset ids."""
        return {
            dimension.value: {
                value: [asset.id for asset in assets]
                for value, assets in self._bucket(dimension).items()
            }
            for dimension in self._dimensions
        }

    def __len__(self) -> int:
        return len(self._assets)


def build_dimension_index(
    assets: Sequence[Asset],
    dimension_keys: Optional[Iterable[object]] = None,
) -> DimensionIndex:
    """
    Build a DimensionIndex over a snapshot of assets.

    Args:
        assets: Ordered asset snapshot.
        dimension_keys: Keys to index; defaults to all five in canonical order.

    Raises:
        InvalidArgumentError: If a key is not a string or not a known dimension.
    """
    return DimensionIndex(assets, resolve_dimensions(dimension_keys))
