"""Entry and configuration models."""

from jsonlog.schemas.config import (
    DEFAULT_TIMESTAMP_FORMAT,
    RFC3339,
    FieldKey,
    FieldKeyMap,
    FormatterConfig,
)
from jsonlog.schemas.entry import Level, LogEntry

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "RFC3339",
    "FieldKey",
    "FieldKeyMap",
    "FormatterConfig",
    "Level",
    "LogEntry",
]
