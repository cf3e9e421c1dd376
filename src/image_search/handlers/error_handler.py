"""HTTP handlers for error reporting.

Lets other parts of the image search subsystem (e.g. the browser client)
report failures into the same recorder the service uses.
"""

from image_search.dto import (
    ErrorStatsResponse,
    ReportErrorRequest,
    SearchErrorItem,
)
from image_search.entities import SearchError
from image_search.services import ErrorRecorder


def _to_item(record: SearchError) -> SearchErrorItem:
    return SearchErrorItem(
        code=record.code,
        message=record.message,
        timestamp=record.timestamp,
        context=dict(record.context),
    )


class ErrorReportHandler:
    """HTTP handlers for the error recorder."""

    def __init__(self, recorder: ErrorRecorder) -> None:
        """Initialize the handler.

        Args:
            recorder: The error recorder (required).
        """
        self._recorder = recorder

    async def report_error(self, request: ReportErrorRequest) -> SearchErrorItem:
        """Handle POST /errors requests.

        Recording never fails, so there is no error branch here.
        """
        record = self._recorder.handle_search_error(
            request.message,
            request.search_query,
            request.context,
        )
        return _to_item(record)

    async def get_stats(self) -> ErrorStatsResponse:
        """Handle GET /errors/stats requests."""
        stats = self._recorder.get_error_stats()
        return ErrorStatsResponse(
            total=stats.total,
            recent=[_to_item(r) for r in stats.recent],
        )
