"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Generator
from datetime import datetime, timezone
import json
import os
from typing import Any

import pytest

from jsonlog import JsonFormatter, Level, LogEntry
from jsonlog.core import get_settings

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test with fresh settings and no JSONLOG_* environment."""
    for name in list(os.environ):
        if name.upper().startswith("JSONLOG_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def formatter() -> JsonFormatter:
    """Formatter with the default configuration."""
    return JsonFormatter()


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed instant with sub-second precision."""
    return datetime(2024, 3, 9, 14, 5, 30, 123456, tzinfo=timezone.utc)


EntryFactory = Callable[..., LogEntry]


@pytest.fixture
def make_entry() -> EntryFactory:
    """Build entries the way a bare logger call with fields would."""

    def _make(
        attributes: dict[str, Any] | None = None,
        *,
        message: str = "",
        level: Level | str = Level.INFO,
        time: datetime = ZERO_TIME,
    ) -> LogEntry:
        return LogEntry(message=message, level=level, time=time, attributes=attributes or {})

    return _make


@pytest.fixture
def decode() -> Callable[[bytes], dict[str, Any]]:
    """Parse a formatted document, checking the newline framing first."""

    def _decode(output: bytes) -> dict[str, Any]:
        assert output.endswith(b"\n")
        assert not output.endswith(b"\n\n")
        return json.loads(output[:-1])

    return _decode
