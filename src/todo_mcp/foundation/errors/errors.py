"""Error vocabulary for the todo tools.

ErrorCode names every failure a caller can see. ApiError and ConfigError are
the exceptions this package raises itself; anything else escaping a tool is
classified by type when it is turned into a result.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ErrorCode(StrEnum):
    INVALID_PARAMS = "INVALID_PARAMS"
    NOT_FOUND = "NOT_FOUND"
    API_KEY_INVALID = "API_KEY_INVALID"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    RATE_LIMITED = "RATE_LIMITED"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN = "UNKNOWN"

    @property
    def transient(self) -> bool:
        """Whether the same call may succeed later."""
        return self in _TRANSIENT


_TRANSIENT = frozenset({
    ErrorCode.RATE_LIMITED,
    ErrorCode.EXTERNAL_SERVICE_ERROR,
    ErrorCode.NETWORK_ERROR,
    ErrorCode.TIMEOUT,
})

_STATUS_CODES: dict[int, ErrorCode] = {
    400: ErrorCode.INVALID_PARAMS,
    401: ErrorCode.API_KEY_INVALID,
    403: ErrorCode.PERMISSION_DENIED,
    404: ErrorCode.NOT_FOUND,
    422: ErrorCode.INVALID_PARAMS,
    429: ErrorCode.RATE_LIMITED,
}


class ApiError(Exception):
    """Non-2xx response from the Todo API.

    Status, reason phrase and body text are kept unchanged so the caller sees
    exactly what the API reported.
    """

    def __init__(self, status_code: int, reason: str = "", body: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"API request failed: {status_code} {reason}. {body}".rstrip())

    @property
    def code(self) -> ErrorCode:
        return _STATUS_CODES.get(self.status_code, ErrorCode.EXTERNAL_SERVICE_ERROR)

    @property
    def recoverable(self) -> bool:
        return self.status_code == 429 or self.status_code >= 500


class ConfigError(Exception):
    """Startup configuration is missing or invalid. Fatal."""


def classify_exception(exc: BaseException) -> ErrorCode:
    """Error code for an exception raised while serving a tool call."""
    match exc:
        case ApiError():
            return exc.code
        case ValidationError():
            return ErrorCode.INVALID_PARAMS
        case TimeoutError():
            return ErrorCode.TIMEOUT
        case ConnectionError():
            return ErrorCode.NETWORK_ERROR
        case orjson.JSONDecodeError():
            return ErrorCode.PARSE_ERROR
        case _:
            return ErrorCode.EXTERNAL_SERVICE_ERROR


class ToolError(BaseModel):
    """A failed tool call as reported to the calling agent.

    Attributes:
        tool_name: Tool that failed
        message: Human-readable reason, shown verbatim
        code: Machine-readable classification
        recoverable: Advisory; the server itself never retries
        details: Optional traceback or diagnostic text
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    tool_name: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    code: ErrorCode = ErrorCode.UNKNOWN
    recoverable: bool = False
    details: str | None = None

    @classmethod
    def from_exception(cls, tool_name: str, exc: Exception, context: str = "") -> Self:
        code = classify_exception(exc)
        return cls(
            tool_name=tool_name,
            message=f"{context}: {exc}" if context else str(exc),
            code=code,
            recoverable=exc.recoverable if isinstance(exc, ApiError) else code.transient,
        )

    def render(self) -> str:
        """Format for LLM consumption."""
        text = f"**Tool Error ({self.tool_name}):** {self.message}"
        if self.recoverable:
            text += "\n_This error may be recoverable - consider retrying or trying an alternative approach._"
        if self.details:
            text += f"\n\nDetails:\n```\n{self.details}\n```"
        return text

    __str__ = render
