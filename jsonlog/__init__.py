"""Render structured log entries as single-line JSON documents."""

from jsonlog.formatter import EncodingFailure, JsonFormatter, format_timestamp
from jsonlog.schemas import (
    DEFAULT_TIMESTAMP_FORMAT,
    RFC3339,
    FieldKey,
    FieldKeyMap,
    FormatterConfig,
    Level,
    LogEntry,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "RFC3339",
    "EncodingFailure",
    "FieldKey",
    "FieldKeyMap",
    "FormatterConfig",
    "JsonFormatter",
    "Level",
    "LogEntry",
    "format_timestamp",
]
