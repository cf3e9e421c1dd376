"""Request DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class StoreValueRequest(BaseModel):
    """Request DTO for storing a cache value."""

    value: str = Field(..., description="The value to cache (e.g. an image URL)", min_length=1)


class ReportErrorRequest(BaseModel):
    """Request DTO for reporting an image search failure.

    The handler will convert this to a call on the error recorder.
    """

    message: str = Field(..., description="The failure message", min_length=1)
    search_query: str = Field(..., description="The query being served when it failed")
    context: dict[str, Any] | None = Field(
        default_factory=dict,
        description="Optional caller metadata (page, provider, filters, etc.)",
    )
