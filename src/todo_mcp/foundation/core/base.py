"""Core tool abstractions: BaseTool, ToolMetadata, and parameter types.

Tools are defined by subclassing BaseTool with a typed pydantic parameter
schema and a native async `_async_run`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ToolResult, exception_result, ok_result, result_to_string


class ToolMetadata(BaseModel):
    """Metadata describing a tool.

    Attributes:
        name: Unique identifier (snake_case, e.g., "create_todo")
        description: What the tool does (shown to the LLM for selection)
        category: Grouping category
        enabled: Whether tool is currently active
        read_only: Whether the tool only reads remote state
        destructive: Whether the tool irreversibly removes remote state
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    description: str = Field(..., min_length=10)
    category: str = Field(default="general")
    enabled: bool = Field(default=True)
    read_only: bool = Field(default=False)
    destructive: bool = Field(default=False)


class EmptyParams(BaseModel):
    """Parameter schema for tools with no inputs."""

    model_config = ConfigDict(extra="forbid")


TParams = TypeVar("TParams", bound=BaseModel)


class BaseTool(ABC, Generic[TParams]):
    """Abstract base class for all tools.

    Subclasses must:
    - Define `metadata` class variable with ToolMetadata
    - Define `params_schema` class variable with the pydantic model type
    - Implement `_async_run(params)` returning a string result

    Example:
        >>> class PingTool(BaseTool[EmptyParams]):
        ...     metadata = ToolMetadata(name="ping", description="Check that the server answers")
        ...     params_schema = EmptyParams
        ...
        ...     async def _async_run(self, params: EmptyParams) -> str:
        ...         return "pong"
    """

    metadata: ClassVar[ToolMetadata]
    params_schema: ClassVar[type[BaseModel]]

    @abstractmethod
    async def _async_run(self, params: TParams) -> str:
        """Execute the tool. Raise on failure; the base class converts exceptions to Err."""
        ...

    async def arun_result(self, params: TParams) -> ToolResult:
        """Run the tool; any exception becomes an Err attributed to it."""
        try:
            return ok_result(await self._async_run(params))
        except Exception as e:
            return exception_result(self.metadata.name, e)

    async def arun(self, params: TParams) -> str:
        return result_to_string(await self.arun_result(params), self.metadata.name)

    async def acall(self, **kwargs: object) -> str:
        """Async invoke with keyword arguments (raises ValidationError on bad input)."""
        params = self.params_schema(**kwargs)  # type: ignore[call-arg]
        return await self.arun(params)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.metadata.name!r})"
