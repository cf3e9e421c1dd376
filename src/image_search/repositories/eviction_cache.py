"""In-process LRU cache for image search results.

Maps string keys (typically normalized search queries) to string values
(typically image URLs), holding at most ``max_size`` entries. When a new
key is inserted into a full cache, the least recently used entry is evicted.
Both writes and successful reads count as a use.
"""

import itertools
import threading
from collections import OrderedDict

from image_search.config import get_settings
from image_search.models import CacheStats

DEFAULT_MAX_SIZE = 100


class EvictionCache:
    """Bounded string-to-string cache with LRU eviction.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Every resident key carries a last-access tick taken from a strictly
    increasing counter, kept in ``_access_order`` in recency order. The
    first key of that map is therefore always the one with the smallest
    tick, so eviction picks the same entry as a full scan would, in O(1).

    Example:
        ```python
        cache = EvictionCache(max_size=2)
        cache.set("cats", "https://img.example.com/cats.png")
        cache.set("dogs", "https://img.example.com/dogs.png")
        cache.get("cats")               # refreshes "cats"
        cache.set("birds", "...")       # evicts "dogs"
        ```
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        """Initialize the cache.

        Args:
            max_size: Maximum number of entries. Must be at least 1.
        """
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")

        self._max_size = max_size
        self._entries: dict[str, str] = {}
        self._access_order: OrderedDict[str, int] = OrderedDict()
        self._ticks = itertools.count()
        self._hits = 0
        self._misses = 0
        self._lock = threading.Lock()

    @classmethod
    def create(cls, max_size: int | None = None) -> "EvictionCache":
        """Factory method to create EvictionCache with defaults.

        Args:
            max_size: Capacity. If None, uses settings.

        Returns:
            Configured EvictionCache
        """
        if max_size is None:
            max_size = get_settings().cache_max_size
        return cls(max_size=max_size)

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite an entry.

        Inserting a new key into a full cache evicts the least recently
        used entry first. Overwriting an existing key never evicts.

        Args:
            key: Cache key
            value: Value to store
        """
        with self._lock:
            if len(self._entries) >= self._max_size and key not in self._entries:
                self._evict_least_recently_used()

            self._entries[key] = value
            self._touch(key)

    def get(self, key: str) -> str | None:
        """Look up an entry, refreshing its recency on a hit.

        Args:
            key: Cache key

        Returns:
            The stored value, or None when absent
        """
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
                return None

            self._hits += 1
            self._touch(key)
            return value

    def delete(self, key: str) -> bool:
        """Remove a single entry.

        Args:
            key: Cache key

        Returns:
            True if the entry existed, False otherwise
        """
        with self._lock:
            if key not in self._entries:
                return False
            del self._entries[key]
            del self._access_order[key]
            return True

    def clear(self) -> None:
        """Remove all entries. Hit/miss counters are left untouched."""
        with self._lock:
            self._entries.clear()
            self._access_order.clear()

    def reset_stats(self) -> None:
        """Reset hit/miss counters."""
        with self._lock:
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> CacheStats:
        """Get cache statistics.

        Returns:
            CacheStats with size, capacity and hit/miss counters
        """
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                max_size=self._max_size,
                hits=self._hits,
                misses=self._misses,
            )

    def last_access(self, key: str) -> int | None:
        """Return the access tick recorded for ``key``, or None if absent."""
        with self._lock:
            return self._access_order.get(key)

    def _touch(self, key: str) -> None:
        """Stamp ``key`` with a fresh tick and move it to the recent end."""
        self._access_order[key] = next(self._ticks)
        self._access_order.move_to_end(key)

    def _evict_least_recently_used(self) -> None:
        """Remove the entry with the oldest access tick from both maps."""
        if not self._access_order:
            return
        oldest_key, _ = self._access_order.popitem(last=False)
        del self._entries[oldest_key]

    def __contains__(self, key: object) -> bool:
        """Check membership without refreshing recency."""
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        """Get current number of entries."""
        with self._lock:
            return len(self._entries)

    @property
    def max_size(self) -> int:
        """Get configured capacity."""
        return self._max_size
