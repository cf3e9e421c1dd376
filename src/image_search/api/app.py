from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from image_search.api.dependencies import CacheHandlerDep, ErrorHandlerDep, lifespan
from image_search.config import get_settings
from image_search.dto import (
    CacheStatsResponse,
    CacheStoreResponse,
    CacheValueResponse,
    ErrorStatsResponse,
    HealthCheckResponse,
    ReportErrorRequest,
    SearchErrorItem,
    StoreValueRequest,
)

app = FastAPI(
    title="Image Search Core API",
    description="LRU result cache and error recorder for the image search subsystem",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Image Search Core API",
        "version": "0.1.0",
        "description": "LRU result cache and error recorder for the image search subsystem",
        "endpoints": {
            "cache": "/cache",
            "errors": "/errors",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(request: Request) -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(
        status="healthy",
        environment=get_settings().environment.value,
        cache_size=len(request.app.state.cache),
    )


# Registered before /cache/{key} so "stats" is not read as a key.
@app.get("/cache/stats", response_model=CacheStatsResponse)
async def cache_stats(handler: CacheHandlerDep) -> CacheStatsResponse:
    """Get cache size, capacity and hit rate."""
    return await handler.get_stats()


@app.get("/cache/{key}", response_model=CacheValueResponse)
async def get_value(key: str, handler: CacheHandlerDep) -> CacheValueResponse:
    """Look up a cached value."""
    return await handler.get_value(key)


@app.put("/cache/{key}", response_model=CacheStoreResponse)
async def store_value(
    key: str, request: StoreValueRequest, handler: CacheHandlerDep
) -> CacheStoreResponse:
    """Insert or overwrite a cached value."""
    return await handler.store_value(key, request)


@app.delete("/cache/{key}", response_model=dict[str, Any])
async def delete_value(key: str, handler: CacheHandlerDep) -> dict[str, Any]:
    """Remove a single cached value."""
    return await handler.delete_value(key)


@app.delete("/cache", response_model=dict[str, Any])
async def clear_cache(handler: CacheHandlerDep) -> dict[str, Any]:
    """Clear all entries from the cache."""
    return await handler.clear_cache()


@app.post("/errors", response_model=SearchErrorItem)
async def report_error(request: ReportErrorRequest, handler: ErrorHandlerDep) -> SearchErrorItem:
    """Record an image search failure reported by a client."""
    return await handler.report_error(request)


@app.get("/errors/stats", response_model=ErrorStatsResponse)
async def error_stats(handler: ErrorHandlerDep) -> ErrorStatsResponse:
    """Get the retained error count and the recent records."""
    return await handler.get_stats()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "image_search.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
