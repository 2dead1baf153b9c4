"""JSON log formatter: one structured entry in, one newline-terminated JSON document out.

Every entry attribute is nested under a ``"fields"`` object. The reserved
role values (timestamp, level, message) are always written at the top level
under their configured key names. When an attribute shares a name with one of
those keys, a copy is kept inside ``fields`` as ``"fields.<name>"`` so the
user's value survives next to the structured one.

Example:
    >>> formatter = JsonFormatter(field_key_map={"time": "@timestamp"})
    >>> formatter.format(LogEntry(message="oh hai", level=Level.INFO, time=now))
    b'{"fields":{},"@timestamp":"...","message":"oh hai","level":"info"}\\n'
"""

from datetime import datetime, timezone
import json
import re
from typing import Any

from jsonlog.schemas.config import RFC3339, FieldKey, FieldKeyMap, FormatterConfig
from jsonlog.schemas.entry import LogEntry

FIELDS_KEY = "fields"
CLASH_PREFIX = FIELDS_KEY + "."

# Clash checks run in this order; it only matters when two roles share a name.
_CLASH_ORDER = (FieldKey.TIME, FieldKey.MESSAGE, FieldKey.LEVEL)

# "%%" is matched too so an escaped "%%Y" stays literal.
_YEAR_DIRECTIVE = re.compile(r"%([%Y])")


class EncodingFailure(Exception):
    """Raised when the assembled document cannot be serialized to JSON."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"failed to marshal fields to JSON, {cause}")
        self.cause = cause


def format_timestamp(moment: datetime, fmt: str = RFC3339) -> str:
    """Render an instant as text.

    ``RFC3339`` gives second precision with ``Z`` for UTC; anything else is a
    strftime pattern. Naive datetimes are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if fmt == RFC3339:
        return moment.replace(tzinfo=None).isoformat(timespec="seconds") + _rfc3339_offset(moment)
    # strftime leaves %Y unpadded for years before 1000 on some platforms
    year = f"{moment.year:04d}"
    return moment.strftime(_YEAR_DIRECTIVE.sub(lambda m: year if m.group(1) == "Y" else "%%", fmt))


def _rfc3339_offset(moment: datetime) -> str:
    offset = moment.utcoffset()
    if not offset:
        return "Z"
    sign = "-" if offset.total_seconds() < 0 else "+"
    # Seconds in the offset are dropped; RFC 3339 only allows hours and minutes.
    minutes = int(abs(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _normalize(value: Any) -> Any:
    if isinstance(value, BaseException):
        return str(value) or type(value).__name__
    return value


def prefix_field_clashes(fields: dict[str, Any], key_map: FieldKeyMap) -> None:
    """Copy attributes named like a reserved key to ``fields.<name>``, in place."""
    for role in _CLASH_ORDER:
        name = key_map.resolve(role)
        if name in fields:
            fields[CLASH_PREFIX + name] = fields[name]


class JsonFormatter:
    """Render LogEntry objects as single-line JSON documents.

    Holds only an immutable FormatterConfig, so one instance can be shared
    between threads.
    """

    def __init__(self, config: FormatterConfig | None = None, **options: Any) -> None:
        if config is not None and options:
            raise TypeError("pass either a FormatterConfig or keyword options, not both")
        self._config = config if config is not None else FormatterConfig(**options)

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def build_document(self, entry: LogEntry) -> dict[str, Any]:
        """Assemble the document for an entry without serializing it."""
        config = self._config
        key_map = config.field_key_map

        fields = {key: _normalize(value) for key, value in entry.attributes.items()}
        prefix_field_clashes(fields, key_map)

        document: dict[str, Any] = {FIELDS_KEY: fields}
        if not config.disable_timestamp:
            document[key_map.resolve(FieldKey.TIME)] = format_timestamp(
                entry.time, config.timestamp_format
            )
        document[key_map.resolve(FieldKey.MESSAGE)] = entry.message
        document[key_map.resolve(FieldKey.LEVEL)] = str(entry.level)
        return document

    def format(self, entry: LogEntry) -> bytes:
        """Serialize an entry to UTF-8 JSON followed by a single newline.

        Raises:
            EncodingFailure: If an attribute value cannot be represented in JSON
                (unsupported type, cyclic reference, non-finite float).
        """
        document = self.build_document(entry)
        try:
            serialized = json.dumps(
                document,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            ).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodingFailure(e) from e
        return serialized + b"\n"


__all__ = [
    "CLASH_PREFIX",
    "FIELDS_KEY",
    "EncodingFailure",
    "JsonFormatter",
    "format_timestamp",
    "prefix_field_clashes",
]
