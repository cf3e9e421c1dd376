"""Error recorder for image search failures.

This service turns a raw failure into a sanitized, coded, timestamped
SearchError, keeps it in a rolling in-memory log and hands it to an
error sink (log stream or monitoring).
"""

import logging
import threading
from collections import deque
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from image_search.config import get_settings
from image_search.entities import QUERY_CONTEXT_KEY, SearchError
from image_search.fingerprint import generate_error_code, sanitize_error_message
from image_search.models import ErrorStats
from image_search.protocols import ErrorSink

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECORDS = 1000
DEFAULT_RECENT_WINDOW = timedelta(hours=24)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorRecorder:
    """Capture image search failures as SearchError records.

    Recording always succeeds: sink failures are logged and never reach
    the caller of ``handle_search_error``.

    Example:
        ```python
        from image_search.services import ErrorRecorder

        recorder = ErrorRecorder(sink=LoggingErrorSink(Environment.DEVELOPMENT))

        try:
            fetch_images("cats")
        except Exception as exc:
            record = recorder.handle_search_error(exc, "cats", {"page": 2})
        ```
    """

    def __init__(
        self,
        sink: ErrorSink | None = None,
        max_records: int | None = DEFAULT_MAX_RECORDS,
        recent_window: timedelta = DEFAULT_RECENT_WINDOW,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the recorder.

        Args:
            sink: Destination for captured records. None keeps records local.
            max_records: Retention bound for the log, oldest dropped first.
                None keeps every record.
            recent_window: Age limit for ``get_error_stats().recent``.
            clock: Returns the current time. Defaults to UTC now.
        """
        if max_records is not None and max_records < 1:
            raise ValueError("max_records must be positive or None")
        if recent_window <= timedelta(0):
            raise ValueError("recent_window must be positive")

        self._sink = sink
        self._log: deque[SearchError] = deque(maxlen=max_records)
        self._recent_window = recent_window
        self._clock = clock or _utcnow
        self._lock = threading.Lock()

    @classmethod
    def create(cls, sink: ErrorSink | None = None) -> "ErrorRecorder":
        """Factory method to create ErrorRecorder from settings.

        Args:
            sink: Destination for captured records.

        Returns:
            Configured ErrorRecorder
        """
        settings = get_settings()
        return cls(
            sink=sink,
            max_records=settings.error_log_limit,
            recent_window=timedelta(hours=settings.error_recent_window_hours),
        )

    def handle_search_error(
        self,
        error: BaseException | str,
        search_query: str,
        context: dict[str, Any] | None = None,
    ) -> SearchError:
        """Capture a failure.

        Business logic:
        1. Fingerprint the failure (traceback if raised, else message)
        2. Redact credentials from the message
        3. Merge context on top of ``searchQuery`` (caller keys win)
        4. Append to the log and dispatch to the sink

        Args:
            error: The exception or failure message
            search_query: The query that was being served
            context: Optional caller metadata

        Returns:
            The captured SearchError
        """
        record = SearchError(
            code=generate_error_code(error),
            message=sanitize_error_message(str(error)),
            timestamp=self._clock(),
            context={QUERY_CONTEXT_KEY: search_query, **(context or {})},
        )

        with self._lock:
            self._log.append(record)

        self._dispatch(record)
        return record

    def get_error_stats(self) -> ErrorStats:
        """Count retained records and list those inside the recent window.

        Returns:
            ErrorStats with the retained total and the recent records
        """
        with self._lock:
            snapshot = list(self._log)

        now = self._clock()
        recent = [r for r in snapshot if now - r.timestamp < self._recent_window]
        return ErrorStats(total=len(snapshot), recent=recent)

    def clear(self) -> None:
        """Drop every retained record."""
        with self._lock:
            self._log.clear()

    def _dispatch(self, record: SearchError) -> None:
        if self._sink is None:
            return
        try:
            self._sink.dispatch(record)
        except Exception:
            logger.exception("Error sink failed for %s", record.code)

    @property
    def sink(self) -> ErrorSink | None:
        """Get the configured sink."""
        return self._sink

    @property
    def max_records(self) -> int | None:
        """Get the log retention bound."""
        return self._log.maxlen
