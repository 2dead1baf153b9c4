"""Root logger setup that emits one JSON document per line.

Configure once at application startup. Use structured logs via the extra dict:
    logger.info("message", extra={"key": value})
"""

import logging
import sys
from typing import Any

from jsonlog.core.config import get_settings
from jsonlog.integrations.stdlib import LoggingJsonFormatter
from jsonlog.schemas.config import FormatterConfig


def _to_level(level: str | int) -> int:
    return level if isinstance(level, int) else getattr(logging, level.upper())


def configure_logging(
    level: str | int | None = None,
    *,
    stream: Any = None,
    config: FormatterConfig | None = None,
    logger_levels: dict[str, str | int] | None = None,
) -> None:
    """Configure root logger with JSON output. Call once at application startup.

    Args:
        level: Root logger level (e.g. "INFO", logging.INFO); defaults to the
            ``JSONLOG_LOG_LEVEL`` setting.
        stream: Output stream; defaults to sys.stdout.
        config: Formatter configuration; defaults to one built from settings.
        logger_levels: Optional mapping of logger names to levels, e.g.
            {"urllib3": "WARNING"} to reduce noise from third-party loggers.
    """
    if level is None or config is None:
        settings = get_settings()
        if level is None:
            level = settings.log_level
        if config is None:
            config = settings.to_formatter_config()
    if stream is None:
        stream = sys.stdout

    root = logging.getLogger()
    root.setLevel(_to_level(level))
    root.handlers.clear()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(LoggingJsonFormatter(config))
    handler.setLevel(root.level)
    root.addHandler(handler)

    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(lvl))


__all__ = ["configure_logging"]
