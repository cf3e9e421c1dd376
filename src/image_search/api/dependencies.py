"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from image_search.config import Environment, configure_logging, get_settings
from image_search.handlers import CacheHandler, ErrorReportHandler
from image_search.repositories import EvictionCache, HttpMonitoringSink, LoggingErrorSink
from image_search.services import ErrorRecorder

logger = logging.getLogger(__name__)


def get_cache_handler(request: Request) -> CacheHandler:
    """Dependency injection for CacheHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cache_handler", None)
    if handler is None:
        raise RuntimeError("CacheHandler not initialized. Check lifespan setup.")
    return handler


def get_error_handler(request: Request) -> ErrorReportHandler:
    """Dependency injection for ErrorReportHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "error_handler", None)
    if handler is None:
        raise RuntimeError("ErrorReportHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Sinks - monitoring only in production
    2. Cache and recorder - owned by this app instance
    3. Handlers - stored in app.state.cache_handler / error_handler

    Cleanup:
        Drains the monitoring sink and removes all services from app.state
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    monitoring: HttpMonitoringSink | None = None
    if settings.environment is Environment.PRODUCTION:
        monitoring = HttpMonitoringSink.create()

    sink = LoggingErrorSink(environment=settings.environment, monitoring=monitoring)
    recorder = ErrorRecorder.create(sink=sink)
    cache = EvictionCache.create()

    app.state.cache = cache
    app.state.error_recorder = recorder
    app.state.monitoring_sink = monitoring
    app.state.cache_handler = CacheHandler(cache=cache)
    app.state.error_handler = ErrorReportHandler(recorder=recorder)

    logger.info(
        "Image search core initialized (environment=%s, cache_max_size=%d)",
        settings.environment.value,
        cache.max_size,
    )

    try:
        yield
    finally:
        if monitoring is not None:
            monitoring.close()

        del app.state.error_handler
        del app.state.cache_handler
        del app.state.monitoring_sink
        del app.state.error_recorder
        del app.state.cache
        logger.info("Image search core shut down")


# Type aliases for cleaner dependency injection
CacheHandlerDep = Annotated[CacheHandler, Depends(get_cache_handler)]
ErrorHandlerDep = Annotated[ErrorReportHandler, Depends(get_error_handler)]
