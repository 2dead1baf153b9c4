"""Formatter configuration records."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Named layout for RFC 3339 timestamps (second precision, "Z" for UTC).
RFC3339 = "RFC3339"
DEFAULT_TIMESTAMP_FORMAT = RFC3339


class FieldKey(str, Enum):
    """Reserved roles in the output document; each value is its default key name."""

    TIME = "timestamp"
    LEVEL = "level"
    MESSAGE = "message"


class FieldKeyMap(BaseModel):
    """Per-role overrides for the output key names.

    Example:
        >>> FieldKeyMap(time="@timestamp", level="@level", message="@message")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    time: str | None = Field(default=None, description="Output key for the timestamp")
    level: str | None = Field(default=None, description="Output key for the level")
    message: str | None = Field(default=None, description="Output key for the message")

    def resolve(self, key: FieldKey) -> str:
        """Return the configured key name for a role, or the role's default."""
        override = getattr(self, key.name.lower())
        if override:
            return override
        return key.value


class FormatterConfig(BaseModel):
    """Immutable configuration for a JsonFormatter."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    timestamp_format: str = Field(
        default=DEFAULT_TIMESTAMP_FORMAT,
        description="RFC3339 or a strftime pattern used to render the timestamp",
    )
    disable_timestamp: bool = Field(
        default=False, description="Omit the timestamp key from the output entirely"
    )
    field_key_map: FieldKeyMap = Field(default_factory=FieldKeyMap)

    @field_validator("timestamp_format", mode="before")
    @classmethod
    def _default_empty_format(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_TIMESTAMP_FORMAT
        return value
