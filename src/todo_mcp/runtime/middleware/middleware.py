"""Middleware types and chain composition.

A middleware wraps tool execution in continuation-passing style: it gets the
tool, its validated params, the call context and `next`, and returns the
ToolResult of the call (usually whatever `next` returned).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from functools import reduce
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

from pydantic import BaseModel

if TYPE_CHECKING:
    from ...foundation.core import BaseTool
    from ...foundation.errors import ToolResult


class Context(dict[str, object]):
    """Per-call scratch space shared along the chain (tool_name, duration_ms, ...)."""


Next: TypeAlias = Callable[["BaseTool[BaseModel]", BaseModel, Context], Awaitable["ToolResult"]]


@runtime_checkable
class Middleware(Protocol):
    async def __call__(
        self,
        tool: BaseTool[BaseModel],
        params: BaseModel,
        ctx: Context,
        next: Next,
    ) -> ToolResult: ...


async def _run_tool(tool: BaseTool[BaseModel], params: BaseModel, ctx: Context) -> ToolResult:
    return await tool.arun_result(params)


def _link(downstream: Next, mw: Middleware) -> Next:
    async def step(tool: BaseTool[BaseModel], params: BaseModel, ctx: Context) -> ToolResult:
        return await mw(tool, params, ctx, downstream)
    return step


def compose(middleware: Sequence[Middleware]) -> Next:
    """Fold middleware around the tool call. The first item ends up outermost."""
    return reduce(_link, reversed(middleware), _run_tool)
