"""Environment-based configuration using pydantic-settings.

The pipeline core never reads configuration. Settings are loaded only when
asked for, e.g. by configure_logging() called without explicit arguments.

Example:
    >>> from failable.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # FAILABLE_LOG_LEVEL=DEBUG
    # FAILABLE_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FAILABLE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors (None = auto-detect)")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class FailableSettings(BaseSettings):
    """Root settings for failable.

    Loads configuration from environment variables with FAILABLE_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        FAILABLE_DEBUG=true
        FAILABLE_LOG_LEVEL=DEBUG
        FAILABLE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="FAILABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> FailableSettings:
    """Get the global settings instance (cached)."""
    return FailableSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
