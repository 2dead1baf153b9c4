"""Adapters for the standard library logging module and structlog."""

from jsonlog.integrations.stdlib import LoggingJsonFormatter
from jsonlog.integrations.structlog_renderer import JsonRenderer

__all__ = ["JsonRenderer", "LoggingJsonFormatter"]
