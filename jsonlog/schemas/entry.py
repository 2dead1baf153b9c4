"""Log entry model consumed by the formatter."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
import logging
from typing import Any


class Level(str, Enum):
    """Severity levels, rendered as lowercase text."""

    PANIC = "panic"
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """Map a stdlib numeric level onto the nearest named level at or below it."""
        if levelno > logging.CRITICAL:
            return cls.PANIC
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    @classmethod
    def parse(cls, text: str) -> "Level":
        """Parse a level name case-insensitively.

        Raises:
            ValueError: If the name is not a known level.
        """
        name = text.strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"not a valid log level: {text!r}") from None


_ALIASES = {"warn": "warning", "critical": "fatal"}


@dataclass(frozen=True)
class LogEntry:
    """One log event: message, level, time and free-form attributes.

    The entry is treated as read-only by the formatter; ``attributes`` is never
    mutated.
    """

    message: str
    level: Level | str
    time: datetime
    attributes: Mapping[str, Any] = field(default_factory=dict)
