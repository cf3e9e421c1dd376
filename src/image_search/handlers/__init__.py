"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services and protocols, not on concrete repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .cache_handler import CacheHandler
from .error_handler import ErrorReportHandler

__all__ = [
    "CacheHandler",
    "ErrorReportHandler",
]
