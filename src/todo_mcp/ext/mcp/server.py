"""MCP server exposing the tool registry.

1. **ToolServer** - transport-independent listing and invocation
2. **MCPServer** - FastMCP adapter (stdio by default; sse / streamable-http)

Example:
    >>> server = MCPServer("todo-mcp-server", registry, client=client)
    >>> server.run()  # stdio
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, Literal

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError as MCPToolError
from fastmcp.tools import Tool as MCPTool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import ToolAnnotations
from pydantic import BaseModel, Field

from todo_mcp.foundation.errors import ToolResult, result_to_string, to_tool_error
from todo_mcp.runtime.observability import get_logger

from .bridge import get_tool_schema

if TYPE_CHECKING:
    from todo_mcp.foundation.core import BaseTool
    from todo_mcp.foundation.registry import ToolRegistry
    from todo_mcp.io import TodoApiClient

Transport = Literal["stdio", "sse", "streamable-http"]

SERVER_NAME = "todo-mcp-server"
SERVER_VERSION = "1.0.0"

log = get_logger("todo_mcp.server")


class ToolServer:
    """Lists and invokes registry tools independent of any transport."""

    def __init__(self, name: str, registry: ToolRegistry) -> None:
        self.name = name
        self.registry = registry

    def list_tools(self) -> list[dict[str, object]]:
        """Name, description and JSON Schema of every enabled tool."""
        return [
            {"name": t.metadata.name, "description": t.metadata.description, "parameters": get_tool_schema(t)}
            for t in self.registry
            if t.metadata.enabled
        ]

    async def invoke_result(self, tool_name: str, params: Mapping[str, object] | None) -> ToolResult:
        return await self.registry.execute_result(tool_name, params)

    async def invoke(self, tool_name: str, params: Mapping[str, object] | None) -> str:
        """Tool output, or the rendered error."""
        return result_to_string(await self.invoke_result(tool_name, params), tool_name)


class RegistryTool(MCPTool):
    """FastMCP tool forwarding raw arguments to a ToolServer.

    Arguments are validated by the registry, not by FastMCP, so validation
    errors carry the same field-level message on every transport. Failures
    are raised as MCP tool errors (isError: true).
    """

    target: str
    tool_server: Any = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        result = await self.tool_server.invoke_result(self.target, arguments)
        if result.is_err():
            raise MCPToolError(to_tool_error(result, self.target).render())
        return MCPToolResult(content=result.unwrap())


def to_mcp_tool(server: ToolServer, tool: BaseTool[BaseModel]) -> RegistryTool:
    meta = tool.metadata
    return RegistryTool(
        name=meta.name,
        description=meta.description,
        parameters=get_tool_schema(tool),
        annotations=ToolAnnotations(
            readOnlyHint=meta.read_only,
            destructiveHint=meta.destructive,
            openWorldHint=True,
        ),
        target=meta.name,
        tool_server=server,
    )


class MCPServer(ToolServer):
    """ToolServer exposed to MCP clients through FastMCP.

    The API client is closed whenever a FastMCP lifespan ends and reopens on
    its next request.
    """

    def __init__(
        self,
        name: str,
        registry: ToolRegistry,
        *,
        version: str = SERVER_VERSION,
        client: TodoApiClient | None = None,
    ) -> None:
        super().__init__(name, registry)
        self.version = version
        self.client = client
        self.fastmcp = FastMCP(name, version=version, lifespan=self._lifespan)
        for tool in registry:
            if tool.metadata.enabled:
                self.fastmcp.add_tool(to_mcp_tool(self, tool))

    @asynccontextmanager
    async def _lifespan(self, _server: FastMCP) -> AsyncIterator[dict[str, object]]:
        log.info("server started", server=self.name, version=self.version, tools=len(self.registry))
        try:
            yield {}
        finally:
            if self.client is not None:
                await self.client.aclose()
            log.info("server stopped", server=self.name)

    def run(self, transport: Transport = "stdio", *, host: str = "127.0.0.1", port: int = 8080) -> None:
        """Serve until the transport closes. `host` and `port` apply to HTTP transports only."""
        if transport == "stdio":
            self.fastmcp.run(transport="stdio")
        else:
            self.fastmcp.run(transport=transport, host=host, port=port)


def create_mcp_server(
    registry: ToolRegistry,
    *,
    name: str = SERVER_NAME,
    client: TodoApiClient | None = None,
) -> MCPServer:
    """Create MCP server without starting it."""
    return MCPServer(name, registry, client=client)


def serve_mcp(
    registry: ToolRegistry,
    *,
    name: str = SERVER_NAME,
    client: TodoApiClient | None = None,
    transport: Transport = "stdio",
    host: str = "127.0.0.1",
    port: int = 8080,
) -> None:
    """Expose the registry via MCP (blocking)."""
    create_mcp_server(registry, name=name, client=client).run(transport, host=host, port=port)
