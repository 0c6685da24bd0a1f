"""todo_mcp - MCP server for a remote Todo REST API.

Exposes six tools (create, list, get, update, toggle, delete) over the Model
Context Protocol. Each tool validates its arguments, performs exactly one
HTTP call against the Todo API and returns the JSON response pretty-printed.

Quick Start:
    $ export API_KEY=secret TODO_API_URL=http://localhost:3000
    $ todo-mcp-server

Programmatic use:
    >>> from todo_mcp import TodoApiClient, create_registry, load_settings
    >>>
    >>> settings = load_settings()
    >>> client = TodoApiClient.from_settings(settings)
    >>> registry = create_registry(client)
    >>> await registry.execute("get_todo_by_id", {"id": 5})
"""

__version__ = "1.0.0"

from .ext.mcp import MCPServer, ToolServer, create_mcp_server, serve_mcp
from .foundation.config import TodoSettings, get_settings, load_settings
from .foundation.core import BaseTool, EmptyParams, ToolMetadata
from .foundation.errors import (
    ApiError,
    ConfigError,
    Err,
    ErrorCode,
    ErrorTrace,
    Ok,
    Result,
    ToolError,
    ToolResult,
)
from .foundation.registry import ToolRegistry
from .io import ApiKeyAuth, TodoApiClient
from .runtime.observability import configure_logging, get_logger
from .tools import TODO_TOOLS, Todo, create_registry

__all__ = [
    "__version__",
    # Server
    "MCPServer", "ToolServer", "create_mcp_server", "serve_mcp",
    # Config
    "TodoSettings", "get_settings", "load_settings",
    # Core
    "BaseTool", "EmptyParams", "ToolMetadata", "ToolRegistry",
    # Errors
    "ApiError", "ConfigError", "ErrorCode", "ErrorTrace", "ToolError", "Result", "Ok", "Err", "ToolResult",
    # API
    "ApiKeyAuth", "TodoApiClient", "TODO_TOOLS", "Todo", "create_registry",
    # Logging
    "configure_logging", "get_logger",
]
