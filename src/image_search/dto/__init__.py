"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import ReportErrorRequest, StoreValueRequest
from .responses import (
    CacheStatsResponse,
    CacheStoreResponse,
    CacheValueResponse,
    ErrorStatsResponse,
    HealthCheckResponse,
    SearchErrorItem,
)

__all__ = [
    "StoreValueRequest",
    "ReportErrorRequest",
    "CacheValueResponse",
    "CacheStoreResponse",
    "CacheStatsResponse",
    "SearchErrorItem",
    "ErrorStatsResponse",
    "HealthCheckResponse",
]
