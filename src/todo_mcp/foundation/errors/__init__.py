"""Error handling for todo_mcp.

- ErrorCode: failure classification shown to callers
- ApiError/ConfigError: remote and startup failures
- ToolError: the rendered error shown to callers
- Result/Ok/Err: outcomes of validation and tool execution
- ErrorTrace: message, code and the operations a failure passed through
"""

from .errors import ApiError, ConfigError, ErrorCode, ToolError, classify_exception
from .result import Err, Ok, Result
from .tool import (
    ToolResult,
    exception_result,
    format_validation_error,
    ok_result,
    result_to_string,
    to_tool_error,
    tool_result,
    validation_result,
)
from .types import ErrorTrace, JsonDict, JsonValue, trace

__all__ = [
    "ApiError", "ConfigError", "ErrorCode", "ToolError", "classify_exception",
    "Result", "Ok", "Err",
    "ToolResult", "ok_result", "tool_result", "exception_result", "validation_result",
    "format_validation_error", "to_tool_error", "result_to_string",
    "ErrorTrace", "JsonDict", "JsonValue", "trace",
]
