"""
Snapshot-keyed memoization.

Derived structures are pure functions of the asset snapshot and their
arguments, so a cached result is reusable for as long as the snapshot hash
is unchanged. A store mutation changes the hash and the next call
recomputes from scratch.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CacheStats:
    """
    Attributes:
        hits: Lookups answered from the cache.
        misses: Lookups that ran the computation.
        size: Entries currently held.
    """

    hits: int = 0
    misses: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return round(self.hits / total, 3) if total else 0.0


class SnapshotCache:
    """Bounded LRU keyed by (operation, snapshot hash, arguments)."""

    def __init__(self, max_entries: int = 64):
        self.max_entries = max_entries
        self._entries: OrderedDict[Tuple[str, str, Hashable], Any] = OrderedDict()
        self._stats = CacheStats()

    def get_or_compute(self, operation: str, snapshot_key: str, args: Hashable, compute: Callable[[], T]) -> T:
        key = (operation, snapshot_key, args)
        if key in self._entries:
            self._entries.move_to_end(key)
            self._stats.hits += 1
            logger.debug("Cache hit: %s", operation)
            return self._entries[key]

        self._stats.misses += 1
        value = compute()
        if self.max_entries > 0:
            self._entries[key] = value
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
        return value

    def clear(self) -> None:
        self._entries.clear()

    @property
    def stats(self) -> CacheStats:
        self._stats.size = len(self._entries)
        return self._stats
