from dataclasses import dataclass, field

from image_search.entities import SearchError


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of eviction cache usage."""

    size: int
    max_size: int
    hits: int = 0
    misses: int = 0

    @property
    def lookups(self) -> int:
        """Total number of ``get`` calls counted."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.lookups == 0:
            return 0.0
        return self.hits / self.lookups

    def to_dict(self) -> dict[str, float | int]:
        """Convert stats to dictionary."""
        return {
            "size": self.size,
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hit_rate,
        }


@dataclass
class ErrorStats:
    """Result of an error log query."""

    total: int
    recent: list[SearchError] = field(default_factory=list)
