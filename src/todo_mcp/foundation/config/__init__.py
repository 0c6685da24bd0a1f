"""Configuration management using pydantic-settings."""

from .settings import (
    DEFAULT_API_URL,
    MISSING_API_KEY_MESSAGE,
    HttpSettings,
    LoggingSettings,
    TodoSettings,
    clear_settings_cache,
    get_settings,
    load_settings,
)

__all__ = [
    "DEFAULT_API_URL",
    "MISSING_API_KEY_MESSAGE",
    "HttpSettings",
    "LoggingSettings",
    "TodoSettings",
    "clear_settings_cache",
    "get_settings",
    "load_settings",
]
