"""
Resolution Cache

Bounded in-memory LRU cache for resolver results.  Values may legitimately
be None (a cached "no match"), so misses are reported with the MISSING
sentinel rather than None.
"""

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for 'not yet computed', distinct from a cached None."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int = 0
    misses: int = 0
    sets: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total * 100


class LRUCache:
    """
    Thread-safe least-recently-used cache with a fixed capacity.

    Reads promote the entry, so every operation (reads included) runs
    under one lock.  There is no time-based expiry.
    """

    def __init__(self, max_size: int = 100):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._cache: OrderedDict[Hashable, Any] = OrderedDict()
        self._max_size = max_size
        self._stats = CacheStats()
        self._lock = threading.RLock()

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: Hashable, default: Any = MISSING) -> Any:
        """Get value and move to end (most recently used)."""
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                self._stats.hits += 1
                return self._cache[key]
            self._stats.misses += 1
            return default

    def set(self, key: Hashable, value: Any) -> None:
        """Store value, evicting the least recently used entry when full."""
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self._max_size:
                evicted, _ = self._cache.popitem(last=False)
                self._stats.evictions += 1
                logger.debug("Evicted cache entry %r", evicted)
            self._cache[key] = value
            self._stats.sets += 1

    def get_or_set(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """Return the cached value for key, computing and storing it on a miss."""
        with self._lock:
            value = self.get(key)
            if value is MISSING:
                logger.debug("Cache miss for %r", key, extra={"cache_key": key})
                value = factory()
                self.set(key, value)
            return value

    def delete(self, key: Hashable) -> bool:
        """Delete a key."""
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                return True
            return False

    def clear(self) -> None:
        """Clear all cached data and reset statistics."""
        with self._lock:
            self._cache.clear()
            self._stats = CacheStats()

    def keys(self) -> list[Hashable]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_stats(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self._max_size,
                "hits": self._stats.hits,
                "misses": self._stats.misses,
                "evictions": self._stats.evictions,
                "hit_rate": f"{self._stats.hit_rate:.2f}%",
            }
