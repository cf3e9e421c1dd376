"""Repository layer for data access and external delivery.

This layer hides storage and I/O (in-process cache, log stream, HTTP
monitoring) behind protocol-based interfaces. This enables:
- Easy swapping of implementations
- Unit testing with mock implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from image_search.protocols import CacheStore, ErrorSink

from .eviction_cache import EvictionCache
from .logging_sink import LoggingErrorSink
from .monitoring_sink import HttpMonitoringSink

__all__ = [
    "CacheStore",
    "ErrorSink",
    "EvictionCache",
    "HttpMonitoringSink",
    "LoggingErrorSink",
]
