"""Error sink protocol.

A sink is any destination that consumes captured error records: a log
stream, a monitoring endpoint, a test double. The recorder never depends
on a sink succeeding.
"""

from typing import Protocol, runtime_checkable

from image_search.entities import SearchError


@runtime_checkable
class ErrorSink(Protocol):
    """Protocol for error record destinations."""

    def dispatch(self, record: SearchError) -> None:
        """Hand a record to the sink.

        Implementations should return promptly; slow delivery belongs in
        a background task.

        Args:
            record: The captured error record
        """
        ...
