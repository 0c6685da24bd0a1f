"""Shared fixtures: an in-memory Todo API, a client bound to it, and the registry."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from todo_mcp.foundation.config import clear_settings_cache
from todo_mcp.foundation.registry import ToolRegistry
from todo_mcp.foundation.testing import MockTodoAPI
from todo_mcp.io import TodoApiClient
from todo_mcp.runtime.observability import NoOpRenderer
from todo_mcp.runtime.observability import logging as obs_logging
from todo_mcp.tools import create_registry

_ENV_VARS = (
    "API_KEY",
    "TODO_API_URL",
    "TODO_MCP_LOG_LEVEL",
    "TODO_MCP_LOG_FORMAT",
    "TODO_MCP_HTTP_TIMEOUT",
    "TODO_MCP_HTTP_USER_AGENT",
)


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(obs_logging, "_renderer", NoOpRenderer())


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[pytest.MonkeyPatch]:
    """Environment with no server variables set and no .env in the working directory."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield monkeypatch
    clear_settings_cache()


@pytest.fixture
def api() -> MockTodoAPI:
    return MockTodoAPI(api_key="test-key")


@pytest.fixture
def client(api: MockTodoAPI) -> TodoApiClient:
    return api.client("test-key")


@pytest.fixture
def registry(client: TodoApiClient) -> ToolRegistry:
    return create_registry(client)
