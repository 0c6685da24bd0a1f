"""Per-call logging middleware."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel

from ...foundation.errors import Err, Ok
from ..observability import BoundLogger, get_logger
from .middleware import Context, Next

if TYPE_CHECKING:
    from ...foundation.core import BaseTool
    from ...foundation.errors import ToolResult


def _elapsed_ms(start: float, ctx: Context) -> float:
    ctx["duration_ms"] = ms = round((time.perf_counter() - start) * 1000, 1)
    return ms


@dataclass(slots=True)
class LoggingMiddleware:
    """Log each tool call: DEBUG on start, INFO on success, WARNING on a
    failed result, ERROR with traceback if an exception escapes the chain.

    The call duration is also stored in the context as `duration_ms`.

    Args:
        log: Logger to use (defaults to todo_mcp.tools)
        log_params: Include the validated arguments in the start event
    """

    log: BoundLogger = field(default_factory=lambda: get_logger("todo_mcp.tools"))
    log_params: bool = False

    async def __call__(
        self,
        tool: BaseTool[BaseModel],
        params: BaseModel,
        ctx: Context,
        next: Next,
    ) -> ToolResult:
        log = self.log.bind(tool=tool.metadata.name)
        extra = {"params": params.model_dump(mode="json", by_alias=True, exclude_none=True)} if self.log_params else {}
        log.debug("tool started", **extra)

        start = time.perf_counter()
        try:
            result = await next(tool, params, ctx)
        except Exception:
            log.exception("tool raised", duration_ms=_elapsed_ms(start, ctx))
            raise

        elapsed = _elapsed_ms(start, ctx)
        match result:
            case Ok():
                log.info("tool succeeded", duration_ms=elapsed)
            case Err(err):
                log.warning(
                    "tool failed",
                    duration_ms=elapsed,
                    code=err.error_code,
                    error=err.message,
                    recoverable=err.recoverable,
                )
        return result
