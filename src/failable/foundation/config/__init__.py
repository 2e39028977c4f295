"""Configuration management using pydantic-settings."""

from .settings import (
    FailableSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "FailableSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
