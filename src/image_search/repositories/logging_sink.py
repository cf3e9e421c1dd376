"""Environment-aware error sink.

Routes captured error records by deployment environment:
- development: written to the ``image_search`` diagnostic log
- production: forwarded to the monitoring sink
- anything else: dropped
"""

import logging

from image_search.config import Environment
from image_search.entities import SearchError
from image_search.protocols import ErrorSink

logger = logging.getLogger("image_search.errors")


class LoggingErrorSink:
    """ErrorSink that branches on an injected Environment."""

    def __init__(self, environment: Environment, monitoring: ErrorSink | None = None) -> None:
        """Initialize the sink.

        Args:
            environment: Deployment environment deciding the destination.
            monitoring: Sink used in production. Records are dropped in
                production when not provided.
        """
        self._environment = environment
        self._monitoring = monitoring

    def dispatch(self, record: SearchError) -> None:
        if self._environment is Environment.DEVELOPMENT:
            logger.error("[ImageSearch Error] %s", record)
        elif self._environment is Environment.PRODUCTION and self._monitoring is not None:
            self._monitoring.dispatch(record)

    @property
    def environment(self) -> Environment:
        """Get the configured environment."""
        return self._environment
