"""Image Search Core - LRU result caching and error capture for image search.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CacheStore, ErrorSink)
    - repositories: Cache and sink implementations
    - services: Business logic (ErrorRecorder)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from image_search import EvictionCache, ErrorRecorder

    cache = EvictionCache(max_size=100)
    recorder = ErrorRecorder()
    ```

For HTTP API:
    ```python
    from image_search.api.app import app
    ```
"""

from image_search.config import Environment, Settings, get_settings
from image_search.dto import ReportErrorRequest, StoreValueRequest
from image_search.entities import SearchError
from image_search.fingerprint import generate_error_code, sanitize_error_message, simple_hash
from image_search.handlers import CacheHandler, ErrorReportHandler
from image_search.models import CacheStats, ErrorStats
from image_search.protocols import CacheStore, ErrorSink
from image_search.repositories import EvictionCache, HttpMonitoringSink, LoggingErrorSink
from image_search.services import ErrorRecorder

__all__ = [
    # Configuration
    "Environment",
    "Settings",
    "get_settings",
    # Protocols (interfaces)
    "CacheStore",
    "ErrorSink",
    # Services (business logic)
    "ErrorRecorder",
    # Handlers (HTTP)
    "CacheHandler",
    "ErrorReportHandler",
    # Repositories
    "EvictionCache",
    "HttpMonitoringSink",
    "LoggingErrorSink",
    # Entities and value objects
    "SearchError",
    "CacheStats",
    "ErrorStats",
    # Fingerprinting
    "simple_hash",
    "generate_error_code",
    "sanitize_error_message",
    # DTOs (API contracts)
    "ReportErrorRequest",
    "StoreValueRequest",
]
