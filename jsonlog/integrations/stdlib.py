"""Adapter that plugs JsonFormatter into the standard library logging module.

Use structured logs via the extra dict:
    logger.info("message", extra={"key": value})
"""

from datetime import datetime, timezone
import logging
from typing import Any

from jsonlog.formatter import JsonFormatter
from jsonlog.schemas.config import FormatterConfig
from jsonlog.schemas.entry import Level, LogEntry

# Standard LogRecord attribute names to exclude from the attributes.
_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "message",
        "thread",
        "threadName",
        "taskName",
        "getMessage",
        "asctime",
    }
)

# Third-party / display-only attributes to never include in output (e.g. ANSI color codes).
_EXCLUDE_EXTRAS = frozenset({"color_message"})


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Extract user-supplied extra fields from a log record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and key not in _EXCLUDE_EXTRAS
    }


class LoggingJsonFormatter(logging.Formatter):
    """logging.Formatter that renders records through JsonFormatter.

    The returned text has no trailing newline: StreamHandler appends its own
    terminator. EncodingFailure propagates, so the handler's handleError
    reports it.
    """

    def __init__(self, config: FormatterConfig | None = None, **options: Any) -> None:
        super().__init__()
        self.json_formatter = JsonFormatter(config, **options)

    def to_entry(self, record: logging.LogRecord) -> LogEntry:
        attributes = _extra_fields(record)
        if record.exc_info:
            attributes["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            attributes["stack"] = self.formatStack(record.stack_info)
        return LogEntry(
            message=record.getMessage(),
            level=Level.from_logging(record.levelno),
            time=datetime.fromtimestamp(record.created, tz=timezone.utc),
            attributes=attributes,
        )

    def format(self, record: logging.LogRecord) -> str:
        return self.json_formatter.format(self.to_entry(record)).decode("utf-8").rstrip("\n")


__all__ = ["LoggingJsonFormatter"]
