"""Cache storage protocol.

Defines the interface for a bounded string key-value store used by the
image search subsystem (e.g. query -> image URL).

Implementations can include:
- In-process LRU cache (default)
- Any shared store exposing the same surface
"""

from typing import Protocol, runtime_checkable

from image_search.models import CacheStats


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for string key-value cache backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from image_search.protocols import CacheStore

        store: CacheStore = EvictionCache(max_size=100)
        ```
    """

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite an entry.

        Args:
            key: Cache key
            value: Value to store
        """
        ...

    def get(self, key: str) -> str | None:
        """Look up an entry.

        Args:
            key: Cache key

        Returns:
            The stored value, or None when absent
        """
        ...

    def delete(self, key: str) -> bool:
        """Remove an entry.

        Args:
            key: Cache key

        Returns:
            True if the entry existed, False otherwise
        """
        ...

    def clear(self) -> None:
        """Remove all entries."""
        ...

    def get_stats(self) -> CacheStats:
        """Get cache statistics.

        Returns:
            Current size, capacity and hit/miss counters
        """
        ...
