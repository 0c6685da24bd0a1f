"""Tool lookup, argument validation and execution through middleware.

Arguments arrive as raw JSON objects. They are validated against the named
tool's params model first; only a valid call enters the middleware chain,
so a malformed call never produces an HTTP request.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from ...runtime.middleware import Context, Middleware, Next, compose
from ..errors import (
    ErrorCode,
    ErrorTrace,
    Ok,
    Result,
    ToolResult,
    exception_result,
    result_to_string,
    tool_result,
    validation_result,
)

if TYPE_CHECKING:
    from ..core import BaseTool


class ToolRegistry:
    """Tools by name, plus the middleware every call runs through.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(GetTodoByIdTool(client))
        >>> registry.use(LoggingMiddleware())
        >>> await registry.execute("get_todo_by_id", {"id": 5})
    """

    __slots__ = ("_tools", "_middleware", "_chain")

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool[BaseModel]] = {}
        self._middleware: list[Middleware] = []
        self._chain: Next | None = None

    def register(self, tool: BaseTool[BaseModel]) -> None:
        if (name := tool.metadata.name) in self._tools:
            raise ValueError(f"Tool '{name}' already registered")
        self._tools[name] = tool

    def unregister(self, name: str) -> bool:
        return self._tools.pop(name, None) is not None

    def __getitem__(self, name: str) -> BaseTool[BaseModel]:
        return self._tools[name]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[BaseTool[BaseModel]]:
        return iter(self._tools.values())

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def use(self, middleware: Middleware) -> None:
        """Append middleware; the first one added runs outermost."""
        self._middleware.append(middleware)
        self._chain = None

    def validate(self, name: str, params: Mapping[str, object] | None) -> Result[BaseModel, ErrorTrace]:
        """Ok(params model), or Err naming every offending field."""
        if name not in self._tools:
            return tool_result(name, f"Unknown tool: {name}", code=ErrorCode.NOT_FOUND)
        try:
            return Ok(self._tools[name].params_schema.model_validate(dict(params or {})))
        except ValidationError as e:
            return validation_result(name, e)

    async def execute_result(
        self,
        name: str,
        params: Mapping[str, object] | None,
        *,
        ctx: Context | None = None,
    ) -> ToolResult:
        validated = self.validate(name, params)
        if validated.is_err():
            return validated  # type: ignore[return-value]

        if ctx is None:
            ctx = Context()
        ctx["tool_name"] = name
        if self._chain is None:
            self._chain = compose(self._middleware)
        try:
            return await self._chain(self._tools[name], validated.unwrap(), ctx)
        except Exception as e:
            return exception_result(name, e, "Execution failed")

    async def execute(
        self,
        name: str,
        params: Mapping[str, object] | None,
        *,
        ctx: Context | None = None,
    ) -> str:
        """Like execute_result, with errors rendered as text."""
        return result_to_string(await self.execute_result(name, params, ctx=ctx), name)
