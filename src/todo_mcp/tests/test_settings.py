"""Tests for environment-based settings."""

from __future__ import annotations

import pytest

from todo_mcp.foundation.config import (
    DEFAULT_API_URL,
    MISSING_API_KEY_MESSAGE,
    get_settings,
    load_settings,
)
from todo_mcp.foundation.errors import ConfigError


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "secret")

    settings = load_settings()

    assert settings.api_url == DEFAULT_API_URL == "http://localhost:3000"
    assert settings.api_key.get_secret_value() == "secret"
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.http.timeout == 5.0


def test_api_url_from_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "secret")
    clean_env.setenv("TODO_API_URL", "https://todos.example.com/api/")

    assert load_settings().api_url == "https://todos.example.com/api"


def test_api_url_requires_scheme(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "secret")
    clean_env.setenv("TODO_API_URL", "todos.example.com")

    with pytest.raises(ConfigError, match="TODO_API_URL"):
        load_settings()


def test_missing_api_key(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_settings()
    assert str(exc_info.value) == MISSING_API_KEY_MESSAGE


def test_blank_api_key(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "   ")

    with pytest.raises(ConfigError) as exc_info:
        load_settings()
    assert str(exc_info.value) == MISSING_API_KEY_MESSAGE


def test_api_key_from_dotenv(clean_env: pytest.MonkeyPatch, tmp_path) -> None:
    (tmp_path / ".env").write_text(
        "API_KEY=from-file\n"
        "TODO_API_URL=http://dotenv.test\n"
        "TODO_MCP_LOG_LEVEL=DEBUG\n"
        "TODO_MCP_LOG_FORMAT=json\n"
        "TODO_MCP_HTTP_TIMEOUT=9\n"
    )

    settings = load_settings()

    assert settings.api_key.get_secret_value() == "from-file"
    assert settings.api_url == "http://dotenv.test"
    assert (settings.logging.level, settings.logging.format) == ("DEBUG", "json")
    assert settings.http.timeout == 9.0


def test_nested_settings_from_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "secret")
    clean_env.setenv("TODO_MCP_LOG_LEVEL", "debug")
    clean_env.setenv("TODO_MCP_LOG_FORMAT", "JSON")
    clean_env.setenv("TODO_MCP_HTTP_TIMEOUT", "12.5")

    settings = load_settings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.http.timeout == 12.5


def test_invalid_log_level(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "secret")
    clean_env.setenv("TODO_MCP_LOG_LEVEL", "chatty")

    with pytest.raises(Exception, match="level"):
        load_settings()


def test_settings_are_frozen(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "secret")
    settings = load_settings()

    with pytest.raises(Exception):
        settings.api_url = "http://elsewhere"  # type: ignore[misc]


def test_key_not_leaked_in_repr(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "secret")
    assert "secret" not in repr(load_settings())


def test_get_settings_is_cached(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("API_KEY", "secret")
    assert get_settings() is get_settings()
