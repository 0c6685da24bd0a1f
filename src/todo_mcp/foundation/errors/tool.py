"""Turning validation failures and exceptions into tool results."""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, TypeAlias

from .errors import ApiError, ErrorCode, ToolError, classify_exception
from .result import Err, Ok, Result
from .types import ErrorTrace, trace

if TYPE_CHECKING:
    from pydantic import ValidationError

ToolResult: TypeAlias = Result[str, ErrorTrace]


def ok_result(value: str) -> ToolResult:
    return Ok(value)


def tool_result(
    tool_name: str,
    message: str,
    *,
    code: ErrorCode = ErrorCode.UNKNOWN,
    recoverable: bool = False,
    details: str | None = None,
) -> ToolResult:
    """Err ToolResult attributed to `tool_name`."""
    return Err(trace(message, code=code, recoverable=recoverable, details=details).with_operation(f"tool:{tool_name}"))


def format_validation_error(exc: ValidationError) -> str:
    """`Invalid parameters: field: msg; field: msg`, one pair per offending field."""
    pairs = (
        f"{'.'.join(map(str, err['loc'])) or '(arguments)'}: {err['msg']}"
        for err in exc.errors(include_url=False)
    )
    return "Invalid parameters: " + "; ".join(pairs)


def validation_result(tool_name: str, exc: ValidationError) -> ToolResult:
    return tool_result(tool_name, format_validation_error(exc), code=ErrorCode.INVALID_PARAMS)


def exception_result(tool_name: str, exc: Exception, context: str = "") -> ToolResult:
    """Err ToolResult from a caught exception.

    ApiError keeps its own message and recoverability, so the remote status
    and body reach the caller unchanged. Anything else is classified by type
    and keeps its traceback in details.
    """
    if isinstance(exc, ApiError):
        t = trace(str(exc), code=exc.code, recoverable=exc.recoverable)
    else:
        code = classify_exception(exc)
        message = f"{context}: {exc}" if context else str(exc) or type(exc).__name__
        t = trace(message, code=code, recoverable=code.transient, details=traceback.format_exc())
    t = t.with_operation(f"tool:{tool_name}")
    return Err(t.with_operation(context) if context else t)


def to_tool_error(result: ToolResult, tool_name: str) -> ToolError:
    """ToolError for an Err result. Raises ValueError if Ok."""
    if result.is_ok():
        raise ValueError("Cannot convert Ok result to ToolError")
    err = result.unwrap_err()
    return ToolError(
        tool_name=tool_name.strip() or "unnamed",
        message=err.message,
        code=err.error_code,
        recoverable=err.recoverable,
    )


def result_to_string(result: ToolResult, tool_name: str) -> str:
    """The output for Ok, the rendered ToolError for Err."""
    return result.unwrap() if result.is_ok() else to_tool_error(result, tool_name).render()
