"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from image_search.config import get_settings


class FakeClock:
    """Manually advanced clock for time-window tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 7, 28, 22, 55, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class CollectingSink:
    """ErrorSink test double that keeps every record."""

    def __init__(self) -> None:
        self.records = []

    def dispatch(self, record) -> None:
        self.records.append(record)


class FailingSink:
    """ErrorSink test double that always raises."""

    def dispatch(self, record) -> None:
        raise ConnectionError("monitoring unreachable")


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def collecting_sink():
    """Create a collecting sink."""
    return CollectingSink()


@pytest.fixture
def failing_sink():
    """Create a sink that always fails."""
    return FailingSink()


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings before and after a test that changes env vars."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
