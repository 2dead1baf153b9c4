"""Environment-driven formatter settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonlog.schemas.config import DEFAULT_TIMESTAMP_FORMAT, FieldKeyMap, FormatterConfig


class Settings(BaseSettings):
    """Formatter settings.

    All settings can be overridden via environment variables prefixed with
    ``JSONLOG_`` (e.g. ``JSONLOG_DISABLE_TIMESTAMP=true``).
    """

    model_config = SettingsConfigDict(
        env_prefix="JSONLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    timestamp_format: str = Field(
        default=DEFAULT_TIMESTAMP_FORMAT,
        description="RFC3339 or a strftime pattern for the timestamp value",
    )
    disable_timestamp: bool = Field(default=False, description="Omit the timestamp key")

    # Output key overrides; unset keeps the default name
    time_key: str | None = None
    level_key: str | None = None
    message_key: str | None = None

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Root logger level used by configure_logging"
    )

    def to_formatter_config(self) -> FormatterConfig:
        """Build the immutable formatter configuration from these settings."""
        return FormatterConfig(
            timestamp_format=self.timestamp_format,
            disable_timestamp=self.disable_timestamp,
            field_key_map=FieldKeyMap(
                time=self.time_key,
                level=self.level_key,
                message=self.message_key,
            ),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
