"""Todo tools and the registry that serves them."""

from __future__ import annotations

from collections.abc import Sequence

from todo_mcp.foundation.registry import ToolRegistry
from todo_mcp.io import TodoApiClient
from todo_mcp.runtime.middleware import LoggingMiddleware, Middleware

from .schemas import (
    CreateTodoParams,
    DeleteTodoParams,
    GetTodoByIdParams,
    Todo,
    TodoParams,
    ToggleTodoParams,
    UpdateTodoParams,
)
from .todos import (
    TODO_TOOLS,
    CreateTodoTool,
    DeleteTodoTool,
    GetAllTodosTool,
    GetTodoByIdTool,
    TodoApiTool,
    ToggleTodoTool,
    UpdateTodoTool,
    render_json,
)


def create_registry(client: TodoApiClient, *, middleware: Sequence[Middleware] | None = None) -> ToolRegistry:
    """Registry with every todo tool bound to `client`.

    Args:
        client: Shared API client
        middleware: Execution middleware (default: LoggingMiddleware)
    """
    registry = ToolRegistry()
    for tool_cls in TODO_TOOLS:
        registry.register(tool_cls(client))
    for mw in (LoggingMiddleware(),) if middleware is None else middleware:
        registry.use(mw)
    return registry


__all__ = [
    "TODO_TOOLS",
    "CreateTodoParams",
    "CreateTodoTool",
    "DeleteTodoParams",
    "DeleteTodoTool",
    "GetAllTodosTool",
    "GetTodoByIdParams",
    "GetTodoByIdTool",
    "Todo",
    "TodoApiTool",
    "TodoParams",
    "ToggleTodoParams",
    "ToggleTodoTool",
    "UpdateTodoParams",
    "UpdateTodoTool",
    "create_registry",
    "render_json",
]
