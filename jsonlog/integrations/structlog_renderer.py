"""structlog processor that renders the event dict with JsonFormatter.

Use it as the last processor, paired with a bytes logger:

    structlog.configure(
        processors=[structlog.processors.add_log_level, JsonRenderer()],
        logger_factory=structlog.BytesLoggerFactory(),
    )
"""

from collections.abc import Callable, MutableMapping
from datetime import datetime, timezone
from typing import Any

from jsonlog.formatter import JsonFormatter
from jsonlog.schemas.config import FieldKey, FormatterConfig
from jsonlog.schemas.entry import Level, LogEntry


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JsonRenderer:
    """Turn a structlog event dict into a single-line JSON document.

    ``event`` becomes the message and ``level`` (or the method name) the level.
    A datetime stored under the configured time key is used as the entry time;
    otherwise ``clock`` is called. Every other key becomes an attribute.
    The framing newline is left off; structlog loggers write their own.
    """

    def __init__(
        self,
        config: FormatterConfig | None = None,
        *,
        clock: Callable[[], datetime] = _utc_now,
        **options: Any,
    ) -> None:
        self.json_formatter = JsonFormatter(config, **options)
        self._clock = clock

    def __call__(
        self, _logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> bytes:
        attributes = dict(event_dict)
        message = attributes.pop("event", "")
        level_name = attributes.pop("level", method_name)
        try:
            level: Level | str = Level.parse(str(level_name))
        except ValueError:
            level = str(level_name)

        time_key = self.json_formatter.config.field_key_map.resolve(FieldKey.TIME)
        moment = attributes.get(time_key)
        if isinstance(moment, datetime):
            del attributes[time_key]
        else:
            moment = self._clock()

        entry = LogEntry(
            message=str(message),
            level=level,
            time=moment,
            attributes=attributes,
        )
        return self.json_formatter.format(entry).rstrip(b"\n")


__all__ = ["JsonRenderer"]
