"""Core: settings and logging setup."""

from jsonlog.core.config import Settings, get_settings
from jsonlog.core.logging import configure_logging

__all__ = ["Settings", "configure_logging", "get_settings"]
