"""Response DTOs for API endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class CacheValueResponse(BaseModel):
    """Response DTO for a cache lookup."""

    key: str = Field(..., description="The requested key")
    value: str = Field(..., description="The cached value")


class CacheStoreResponse(BaseModel):
    """Response DTO for cache store operation."""

    success: bool = Field(..., description="Whether the operation succeeded")
    key: str = Field(..., description="The key that was written")
    message: str = Field(..., description="Human-readable status message")


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    size: int = Field(..., description="Number of resident entries", ge=0)
    max_size: int = Field(..., description="Configured capacity", ge=1)
    hits: int = Field(..., description="Successful lookups", ge=0)
    misses: int = Field(..., description="Failed lookups", ge=0)
    hit_rate: float = Field(
        ...,
        description="hits / (hits + misses), 0 when no lookups yet",
        ge=0.0,
        le=1.0,
    )


class SearchErrorItem(BaseModel):
    """Single captured error record."""

    code: str = Field(..., description="Deterministic error fingerprint")
    message: str = Field(..., description="Redacted failure message")
    timestamp: datetime = Field(..., description="When the failure was captured")
    context: dict[str, Any] = Field(default_factory=dict, description="Query and metadata")


class ErrorStatsResponse(BaseModel):
    """Response DTO for error statistics."""

    total: int = Field(..., description="Number of retained records", ge=0)
    recent: list[SearchErrorItem] = Field(
        default_factory=list,
        description="Records captured inside the recent window",
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    environment: str = Field(..., description="Deployment environment")
    cache_size: int = Field(..., description="Current number of cache entries", ge=0)
