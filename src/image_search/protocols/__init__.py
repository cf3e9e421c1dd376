"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (in-process LRU -> shared store, log -> HTTP, etc.)
- Unit testing with mock implementations
- Clear separation of concerns
"""

from .cache_store import CacheStore
from .error_sink import ErrorSink

__all__ = [
    "CacheStore",
    "ErrorSink",
]
