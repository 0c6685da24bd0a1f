"""Environment-based configuration using pydantic-settings.

Settings are read once at startup into a frozen TodoSettings value that is
threaded explicitly into the HTTP client and tools. Supports .env files.

Environment variables:
    API_KEY=...                       # required, sent as x-api-key
    TODO_API_URL=http://localhost:3000
    TODO_MCP_LOG_LEVEL=DEBUG
    TODO_MCP_LOG_FORMAT=json
    TODO_MCP_HTTP_TIMEOUT=10

Example:
    >>> settings = load_settings()
    >>> settings.api_url
    'http://localhost:3000'
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigError

DEFAULT_API_URL = "http://localhost:3000"

MISSING_API_KEY_MESSAGE = (
    "Error: API_KEY environment variable is required but not set.\n"
    "Please set the API_KEY environment variable and try again."
)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_MCP_LOG_", env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class HttpSettings(BaseSettings):
    """HTTP client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_MCP_HTTP_", env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    timeout: PositiveFloat = Field(default=5.0, description="Request timeout in seconds (httpx default)")
    user_agent: str = "todo-mcp-server/1.0.0"


class TodoSettings(BaseSettings):
    """Root settings for the todo MCP server.

    `API_KEY` and `TODO_API_URL` are read without a prefix; everything else
    lives under `TODO_MCP_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        validate_default=True,
    )

    api_url: str = Field(default=DEFAULT_API_URL, validation_alias="TODO_API_URL")
    api_key: SecretStr = Field(..., validation_alias="API_KEY")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)

    @field_validator("api_url", mode="before")
    @classmethod
    def _normalize_url(cls, v: str) -> str:
        if not isinstance(v, str):
            return v
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("TODO_API_URL must start with http:// or https://")
        return v

    @field_validator("api_key")
    @classmethod
    def _require_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("API_KEY must not be blank")
        return v


def _mentions_api_key(exc: ValidationError) -> bool:
    return any("API_KEY" in map(str, err["loc"]) or "api_key" in map(str, err["loc"]) for err in exc.errors())


def load_settings(**overrides: object) -> TodoSettings:
    """Read settings from the environment.

    Raises:
        ConfigError: API_KEY missing or blank, or any other invalid value.
    """
    try:
        return TodoSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        if _mentions_api_key(e):
            raise ConfigError(MISSING_API_KEY_MESSAGE) from e
        raise ConfigError(f"Error: invalid configuration.\n{e}") from e


@lru_cache(maxsize=1)
def get_settings() -> TodoSettings:
    """Get the process-wide settings instance (cached)."""
    return load_settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
