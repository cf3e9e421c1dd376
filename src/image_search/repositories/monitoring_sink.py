"""HTTP monitoring sink.

Posts captured error records as JSON to a monitoring service's
``/api/errors`` endpoint.

Delivery is fire-and-forget:
- ``dispatch`` queues the POST on a single background worker and returns
- each request is bounded by a timeout
- any failure (network errors, non-2xx responses, unserializable context)
  is logged locally and dropped
- no retry, no ordering guarantee
"""

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

import httpx

from image_search.config import get_settings
from image_search.entities import SearchError

logger = logging.getLogger(__name__)

ERRORS_ENDPOINT = "/api/errors"


def serialize_search_error(record: SearchError) -> str:
    """Render a record as the JSON body sent to monitoring.

    Context values that are not JSON-native are rendered with ``str``.
    """
    payload: dict[str, Any] = {
        "code": record.code,
        "message": record.message,
        "timestamp": record.timestamp.isoformat(),
        "context": dict(record.context),
    }
    return json.dumps(payload, default=str)


class HttpMonitoringSink:
    """Monitoring implementation of the ErrorSink protocol.

    This class satisfies the ErrorSink protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        sink = HttpMonitoringSink.create(base_url="https://monitoring.internal")
        sink.dispatch(record)   # returns immediately
        sink.close()            # waits for pending sends
        ```
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the monitoring sink.

        Args:
            base_url: Monitoring service base URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="monitoring-sink")
        self._closed = False

    @property
    def client(self) -> httpx.Client:
        """Lazy-load the HTTP client.

        Returns:
            The httpx.Client instance
        """
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "HttpMonitoringSink":
        """Factory method to create HttpMonitoringSink with defaults.

        Args:
            base_url: Monitoring base URL. If None, uses settings.
            timeout: Request timeout. If None, uses settings.

        Returns:
            Configured HttpMonitoringSink
        """
        settings = get_settings()
        return cls(
            base_url=base_url or settings.monitoring_base_url,
            timeout=timeout or settings.monitoring_timeout,
        )

    def dispatch(self, record: SearchError) -> Future[None] | None:
        """Queue a record for delivery and return immediately.

        Args:
            record: The captured error record

        Returns:
            The background future, or None if the sink is closed
        """
        if self._closed:
            logger.warning("Monitoring sink closed, dropping error %s", record.code)
            return None
        return self._executor.submit(self.send, record)

    def send(self, record: SearchError) -> None:
        """POST a record synchronously, logging any delivery failure.

        Args:
            record: The captured error record
        """
        try:
            response = self.client.post(
                ERRORS_ENDPOINT,
                content=serialize_search_error(record),
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Failed to send error %s to monitoring: %s", record.code, e)
        except Exception:
            # Runs on the background worker; nothing else observes the future.
            logger.exception("Failed to send error %s to monitoring", record.code)

    def close(self, wait: bool = True) -> None:
        """Stop accepting records and release the HTTP client.

        Args:
            wait: Block until queued sends have finished. The client stays
                open when False since a send may still be using it.
        """
        self._closed = True
        self._executor.shutdown(wait=wait)
        if wait and self._client is not None:
            self._client.close()
            self._client = None

    @property
    def closed(self) -> bool:
        """Whether ``close`` has been called."""
        return self._closed

    @property
    def base_url(self) -> str:
        """Get the monitoring base URL."""
        return self._base_url
