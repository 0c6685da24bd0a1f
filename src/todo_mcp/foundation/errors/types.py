"""JSON aliases and the error trace carried by failed results."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorCode

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]


class ErrorTrace(BaseModel):
    """What went wrong in a tool call, plus the operations it passed through.

    Operations are appended innermost first, e.g. ("tool:get_todo_by_id",
    "Execution failed").
    """

    model_config = ConfigDict(frozen=True)

    message: str
    error_code: ErrorCode = ErrorCode.UNKNOWN
    recoverable: bool = False
    details: str | None = Field(default=None, repr=False)
    operations: tuple[str, ...] = ()

    @property
    def root_operation(self) -> str | None:
        return self.operations[0] if self.operations else None

    def with_operation(self, operation: str) -> ErrorTrace:
        return self.model_copy(update={"operations": (*self.operations, operation)})

    def format(self, *, include_details: bool = False) -> str:
        text = f"{self.message} [{self.error_code}]"
        if self.operations:
            text += "\nContext trace:\n" + "\n".join(f"  - {op}" for op in self.operations)
        if include_details and self.details:
            text += f"\nDetails:\n{self.details}"
        return text

    __str__ = format


def trace(
    message: str,
    *,
    code: ErrorCode = ErrorCode.UNKNOWN,
    recoverable: bool = False,
    details: str | None = None,
) -> ErrorTrace:
    return ErrorTrace(message=message, error_code=code, recoverable=recoverable, details=details)
