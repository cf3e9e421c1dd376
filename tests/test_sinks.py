"""
Tests for the logging and monitoring error sinks.
"""

import json
import logging
from datetime import datetime, timezone

import httpx
import pytest

from image_search.config import Environment
from image_search.entities import SearchError
from image_search.protocols import ErrorSink
from image_search.repositories import HttpMonitoringSink, LoggingErrorSink
from image_search.repositories.monitoring_sink import serialize_search_error


@pytest.fixture
def record():
    """Create a sample record."""
    return SearchError(
        code="IMG_SEARCH_1A2B3C4D",
        message="provider timeout token=***",
        timestamp=datetime(2025, 7, 28, 22, 55, tzinfo=timezone.utc),
        context={"searchQuery": "cats", "page": 2},
    )


@pytest.fixture
def captured():
    """Requests seen by the mock monitoring endpoint."""
    return []


def _sink_with(handler) -> HttpMonitoringSink:
    return HttpMonitoringSink(
        base_url="https://monitoring.example.com",
        transport=httpx.MockTransport(handler),
    )


# ------------------------------------------------------------------ #
# LoggingErrorSink
# ------------------------------------------------------------------ #


def test_logging_sink_satisfies_protocol():
    assert isinstance(LoggingErrorSink(Environment.OTHER), ErrorSink)


def test_development_writes_diagnostic_log(record, collecting_sink, caplog):
    sink = LoggingErrorSink(Environment.DEVELOPMENT, monitoring=collecting_sink)

    with caplog.at_level(logging.ERROR, logger="image_search.errors"):
        sink.dispatch(record)

    assert "[ImageSearch Error]" in caplog.text
    assert "IMG_SEARCH_1A2B3C4D" in caplog.text
    assert collecting_sink.records == []


def test_production_forwards_to_monitoring(record, collecting_sink, caplog):
    sink = LoggingErrorSink(Environment.PRODUCTION, monitoring=collecting_sink)

    with caplog.at_level(logging.ERROR, logger="image_search.errors"):
        sink.dispatch(record)

    assert collecting_sink.records == [record]
    assert "[ImageSearch Error]" not in caplog.text


def test_other_environment_does_nothing(record, collecting_sink, caplog):
    sink = LoggingErrorSink(Environment.OTHER, monitoring=collecting_sink)

    with caplog.at_level(logging.DEBUG):
        sink.dispatch(record)

    assert collecting_sink.records == []
    assert caplog.records == []


def test_production_without_monitoring_is_noop(record):
    LoggingErrorSink(Environment.PRODUCTION).dispatch(record)


# ------------------------------------------------------------------ #
# HttpMonitoringSink
# ------------------------------------------------------------------ #


def test_serialize_search_error(record):
    body = json.loads(serialize_search_error(record))
    assert body == {
        "code": "IMG_SEARCH_1A2B3C4D",
        "message": "provider timeout token=***",
        "timestamp": "2025-07-28T22:55:00+00:00",
        "context": {"searchQuery": "cats", "page": 2},
    }


def test_serialize_falls_back_to_str_for_unknown_values(record):
    odd = SearchError(
        code=record.code,
        message=record.message,
        timestamp=record.timestamp,
        context={"searchQuery": "cats", "tags": {"beach"}},
    )
    body = json.loads(serialize_search_error(odd))
    assert body["context"]["tags"] == "{'beach'}"


def test_send_posts_json(record, captured):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(202)

    sink = _sink_with(handler)
    sink.send(record)
    sink.close()

    assert len(captured) == 1
    request = captured[0]
    assert request.method == "POST"
    assert request.url == "https://monitoring.example.com/api/errors"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content)["code"] == "IMG_SEARCH_1A2B3C4D"
    assert json.loads(request.content)["context"]["searchQuery"] == "cats"


def test_dispatch_is_delivered_in_background(record, captured):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200)

    sink = _sink_with(handler)
    future = sink.dispatch(record)
    sink.close(wait=True)

    assert future is not None
    assert future.done()
    assert len(captured) == 1


def test_network_failure_is_logged_not_raised(record, caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    sink = _sink_with(handler)
    with caplog.at_level(logging.ERROR):
        future = sink.dispatch(record)
        sink.close()

    assert future.exception() is None
    assert "Failed to send error IMG_SEARCH_1A2B3C4D to monitoring" in caplog.text


def test_unserializable_context_is_logged_not_raised(record, captured, caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200)

    looped: dict = {"page": 2}
    looped["self"] = looped
    circular = SearchError(
        code=record.code,
        message=record.message,
        timestamp=record.timestamp,
        context={"searchQuery": "cats", "filters": looped},
    )

    sink = _sink_with(handler)
    with caplog.at_level(logging.ERROR):
        future = sink.dispatch(circular)
        sink.close()

    assert future.exception() is None
    assert captured == []
    assert "Failed to send error IMG_SEARCH_1A2B3C4D to monitoring" in caplog.text


def test_error_status_is_logged_not_raised(record, caplog):
    sink = _sink_with(lambda request: httpx.Response(500))

    with caplog.at_level(logging.ERROR):
        sink.send(record)
    sink.close()

    assert "Failed to send error" in caplog.text


def test_dispatch_after_close_is_dropped(record, captured, caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200)

    sink = _sink_with(handler)
    sink.close()

    with caplog.at_level(logging.WARNING):
        assert sink.dispatch(record) is None

    assert captured == []
    assert "dropping error" in caplog.text


def test_create_uses_settings(fresh_settings):
    fresh_settings.setenv("MONITORING_BASE_URL", "https://errors.example.com")
    sink = HttpMonitoringSink.create()
    try:
        assert sink.base_url == "https://errors.example.com"
    finally:
        sink.close()
