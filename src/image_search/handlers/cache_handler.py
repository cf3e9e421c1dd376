"""HTTP handlers for cache operations.

Handlers convert between DTOs (API contracts) and cache calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

from image_search.dto import (
    CacheStatsResponse,
    CacheStoreResponse,
    CacheValueResponse,
    StoreValueRequest,
)
from image_search.protocols import CacheStore


class CacheHandler:
    """HTTP handlers for cache operations.

    Example:
        ```python
        handler = CacheHandler(cache=EvictionCache.create())

        @app.get("/cache/{key}", response_model=CacheValueResponse)
        async def get_value(key: str):
            return await handler.get_value(key)
        ```
    """

    def __init__(self, cache: CacheStore) -> None:
        """Initialize the cache handler.

        Args:
            cache: The cache backend (required).
        """
        self._cache = cache

    async def get_value(self, key: str) -> CacheValueResponse:
        """Handle GET /cache/{key} requests.

        Raises:
            HTTPException: 404 if the key is not cached
        """
        value = self._cache.get(key)
        if value is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No cache entry for key: {key}",
            )
        return CacheValueResponse(key=key, value=value)

    async def store_value(self, key: str, request: StoreValueRequest) -> CacheStoreResponse:
        """Handle PUT /cache/{key} requests.

        Raises:
            HTTPException: If an error occurs during storage
        """
        try:
            self._cache.set(key, request.value)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to store entry: {e}",
            ) from e

        return CacheStoreResponse(
            success=True,
            key=key,
            message="Entry stored successfully",
        )

    async def delete_value(self, key: str) -> dict:
        """Handle DELETE /cache/{key} requests.

        Raises:
            HTTPException: 404 if the key is not cached
        """
        if not self._cache.delete(key):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No cache entry for key: {key}",
            )
        return {"success": True, "key": key, "message": "Entry deleted"}

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests."""
        stats = self._cache.get_stats()
        return CacheStatsResponse(
            size=stats.size,
            max_size=stats.max_size,
            hits=stats.hits,
            misses=stats.misses,
            hit_rate=stats.hit_rate,
        )

    async def clear_cache(self) -> dict:
        """Handle DELETE /cache requests.

        Returns:
            Dict with clear operation result
        """
        try:
            size = self._cache.get_stats().size
            self._cache.clear()
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to clear cache: {e}",
            ) from e

        return {
            "success": True,
            "deleted_count": size,
            "message": "Cache cleared successfully",
        }
