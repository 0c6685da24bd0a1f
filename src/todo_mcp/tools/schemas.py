"""Todo entity and tool parameter schemas.

Parameter models are strict (no type coercion) and forbid unknown fields, so a
malformed call fails validation naming the offending field before any HTTP
request is built. Wire names are camelCase; Python attributes are snake_case.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

TodoId = Annotated[int, Field(gt=0, strict=True)]
Title = Annotated[str, Field(min_length=1)]


class Todo(BaseModel):
    """A todo item as owned and returned by the remote API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="The unique identifier of the todo")
    title: str = Field(..., description="The title of the todo")
    description: str | None = Field(default=None, description="The description of the todo")
    is_completed: bool = Field(..., alias="isCompleted", description="Whether the todo is completed")
    created_at: str = Field(..., alias="createdAt", description="The date when the todo was created")
    updated_at: str = Field(..., alias="updatedAt", description="The date when the todo was last updated")


class TodoParams(BaseModel):
    """Base for tool inputs."""

    model_config = ConfigDict(strict=True, extra="forbid", populate_by_name=True)

    def body(self) -> dict[str, object]:
        """Request body: supplied fields only, wire names, never the path id."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"id"})


class CreateTodoParams(TodoParams):
    title: Title = Field(..., description="The title of the todo (required)")
    description: str | None = Field(default=None, description="The description of the todo (optional)")
    is_completed: bool | None = Field(
        default=None,
        alias="isCompleted",
        description="Whether the todo is completed (optional, default: false)",
    )


class GetTodoByIdParams(TodoParams):
    id: TodoId = Field(..., description="The ID of the todo to retrieve")


class UpdateTodoParams(TodoParams):
    id: TodoId = Field(..., description="The ID of the todo to update")
    title: Title | None = Field(default=None, description="The title of the todo")
    description: str | None = Field(default=None, description="The description of the todo")
    is_completed: bool | None = Field(default=None, alias="isCompleted", description="Whether the todo is completed")


class ToggleTodoParams(TodoParams):
    id: TodoId = Field(..., description="The ID of the todo to toggle")


class DeleteTodoParams(TodoParams):
    id: TodoId = Field(..., description="The ID of the todo to delete")
