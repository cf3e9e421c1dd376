"""
Tests for the error recorder.
"""

import logging
from datetime import datetime, timedelta

import pytest

from image_search.models import ErrorStats
from image_search.services import ErrorRecorder


@pytest.fixture
def recorder(clock, collecting_sink):
    """Create a recorder with a fake clock and a collecting sink."""
    return ErrorRecorder(sink=collecting_sink, clock=clock)


def test_handle_search_error_builds_record(recorder, clock):
    record = recorder.handle_search_error(
        RuntimeError("provider rejected api_key=SECRET"),
        "cats",
        {"page": 2},
    )

    assert record.code.startswith("IMG_SEARCH_")
    assert record.message == "provider rejected api_key=***"
    assert record.timestamp == clock.now
    assert dict(record.context) == {"searchQuery": "cats", "page": 2}


def test_accepts_plain_message(recorder):
    record = recorder.handle_search_error("token: abc failed", "dogs")

    assert record.message == "token=*** failed"
    assert dict(record.context) == {"searchQuery": "dogs"}


def test_caller_context_overrides_query(recorder):
    record = recorder.handle_search_error(ValueError("x"), "cats", {"searchQuery": "dogs"})
    assert dict(record.context) == {"searchQuery": "dogs"}


def test_unrelated_context_keys_keep_query(recorder):
    record = recorder.handle_search_error(ValueError("x"), "cats", {"search_query": "dogs"})
    assert dict(record.context) == {"searchQuery": "cats", "search_query": "dogs"}


def test_records_are_immutable(recorder):
    record = recorder.handle_search_error(ValueError("x"), "cats")
    with pytest.raises(AttributeError):
        record.code = "other"  # type: ignore[misc]


def test_logged_context_cannot_be_rewritten(recorder):
    recorder.handle_search_error(ValueError("x"), "cats")

    with pytest.raises(TypeError):
        recorder.get_error_stats().recent[0].context["searchQuery"] = "tampered"  # type: ignore[index]

    assert recorder.get_error_stats().recent[0].context["searchQuery"] == "cats"


def test_context_is_copied_from_caller(recorder):
    metadata = {"page": 2}
    record = recorder.handle_search_error(ValueError("x"), "cats", metadata)

    metadata["page"] = 99

    assert record.context["page"] == 2


def test_same_text_same_code_and_message(recorder):
    first = recorder.handle_search_error(ValueError("timeout password=a"), "q1")
    second = recorder.handle_search_error(ValueError("timeout password=a"), "q2")

    assert first.code == second.code
    assert first.message == second.message


def test_dispatches_to_sink(recorder, collecting_sink):
    record = recorder.handle_search_error(ValueError("x"), "cats")
    assert collecting_sink.records == [record]


def test_sink_failure_does_not_propagate(clock, failing_sink, caplog):
    recorder = ErrorRecorder(sink=failing_sink, clock=clock)

    with caplog.at_level(logging.ERROR):
        record = recorder.handle_search_error(ValueError("x"), "cats")

    assert record.code.startswith("IMG_SEARCH_")
    assert recorder.get_error_stats().total == 1
    assert "Error sink failed" in caplog.text


def test_works_without_sink(clock):
    recorder = ErrorRecorder(clock=clock)
    recorder.handle_search_error(ValueError("x"), "cats")
    assert recorder.get_error_stats().total == 1


def test_stats_recent_window(recorder, clock):
    old = recorder.handle_search_error(ValueError("old"), "q")
    clock.advance(hours=23)
    mid = recorder.handle_search_error(ValueError("mid"), "q")
    clock.advance(hours=1, seconds=1)
    new = recorder.handle_search_error(ValueError("new"), "q")

    stats = recorder.get_error_stats()

    assert isinstance(stats, ErrorStats)
    assert stats.total == 3
    assert old not in stats.recent
    assert stats.recent == [mid, new]


def test_stats_recomputed_on_every_call(recorder, clock):
    recorder.handle_search_error(ValueError("x"), "q")
    assert len(recorder.get_error_stats().recent) == 1

    clock.advance(hours=25)

    stats = recorder.get_error_stats()
    assert stats.total == 1
    assert stats.recent == []


def test_custom_recent_window(clock):
    recorder = ErrorRecorder(clock=clock, recent_window=timedelta(minutes=5))
    recorder.handle_search_error(ValueError("x"), "q")
    clock.advance(minutes=5)
    assert recorder.get_error_stats().recent == []


def test_log_is_bounded(clock):
    recorder = ErrorRecorder(clock=clock, max_records=2)
    recorder.handle_search_error(ValueError("a"), "q")
    b = recorder.handle_search_error(ValueError("b"), "q")
    c = recorder.handle_search_error(ValueError("c"), "q")

    stats = recorder.get_error_stats()
    assert stats.total == 2
    assert stats.recent == [b, c]


def test_unbounded_log(clock):
    recorder = ErrorRecorder(clock=clock, max_records=None)
    for i in range(1500):
        recorder.handle_search_error(ValueError(str(i)), "q")
    assert recorder.get_error_stats().total == 1500


@pytest.mark.parametrize("kwargs", [{"max_records": 0}, {"recent_window": timedelta(0)}])
def test_rejects_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        ErrorRecorder(**kwargs)


def test_clear(recorder):
    recorder.handle_search_error(ValueError("x"), "q")
    recorder.clear()
    assert recorder.get_error_stats().total == 0


def test_default_clock_is_timezone_aware():
    record = ErrorRecorder().handle_search_error(ValueError("x"), "q")
    assert isinstance(record.timestamp, datetime)
    assert record.timestamp.tzinfo is not None


def test_create_uses_settings(fresh_settings):
    fresh_settings.setenv("ERROR_LOG_MAX_SIZE", "0")
    fresh_settings.setenv("ERROR_RECENT_WINDOW_HOURS", "1")

    recorder = ErrorRecorder.create()

    assert recorder.max_records is None
