"""MCP (Model Context Protocol) adapter.

Exposes the todo tool registry to MCP clients through FastMCP. Each registry
tool becomes one MCP tool with the same name, description and JSON Schema.

Example:
    >>> from todo_mcp.ext.mcp import serve_mcp
    >>> serve_mcp(registry, client=client)  # stdio
"""

from .bridge import get_required_params, get_tool_properties, get_tool_schema
from .server import (
    SERVER_NAME,
    SERVER_VERSION,
    MCPServer,
    RegistryTool,
    ToolServer,
    Transport,
    create_mcp_server,
    serve_mcp,
    to_mcp_tool,
)

__all__ = [
    "SERVER_NAME",
    "SERVER_VERSION",
    "MCPServer",
    "RegistryTool",
    "ToolServer",
    "Transport",
    "create_mcp_server",
    "get_required_params",
    "get_tool_properties",
    "get_tool_schema",
    "serve_mcp",
    "to_mcp_tool",
]
