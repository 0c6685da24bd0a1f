"""The six todo tools, each mapped to exactly one HTTP call.

| Tool                   | Method | Path               | Body                                 |
|------------------------|--------|--------------------|--------------------------------------|
| create_todo            | POST   | /todos             | {title, description?, isCompleted?}  |
| get_all_todos          | GET    | /todos             | none                                 |
| get_todo_by_id         | GET    | /todos/{id}        | none                                 |
| update_todo            | PATCH  | /todos/{id}        | {title?, description?, isCompleted?} |
| toggle_todo_completion | PATCH  | /todos/{id}/toggle | none                                 |
| delete_todo            | DELETE | /todos/{id}        | none                                 |
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

import orjson
from pydantic import BaseModel

from todo_mcp.foundation.core import BaseTool, EmptyParams, ToolMetadata
from todo_mcp.foundation.errors import JsonValue
from todo_mcp.io import HttpMethod, TodoApiClient

from .schemas import (
    CreateTodoParams,
    DeleteTodoParams,
    GetTodoByIdParams,
    ToggleTodoParams,
    UpdateTodoParams,
)

TParams = TypeVar("TParams", bound=BaseModel)


def render_json(data: JsonValue) -> str:
    """Pretty-print an API payload for the caller. None (204) renders empty."""
    if data is None:
        return ""
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode()


class TodoApiTool(BaseTool[TParams]):
    """A tool that relays one request to the Todo API.

    Subclasses declare `method`, `sends_body` and `path()`; the request is
    built from the validated params and the JSON response is returned as is.
    """

    method: ClassVar[HttpMethod]
    sends_body: ClassVar[bool] = False

    __slots__ = ("_client",)

    def __init__(self, client: TodoApiClient) -> None:
        self._client = client

    @property
    def client(self) -> TodoApiClient:
        return self._client

    def path(self, params: TParams) -> str:
        return f"/todos/{params.id}"  # type: ignore[attr-defined]

    def body(self, params: TParams) -> dict[str, object] | None:
        return params.body() if self.sends_body else None  # type: ignore[attr-defined]

    def render(self, params: TParams, data: JsonValue) -> str:
        return render_json(data)

    async def _async_run(self, params: TParams) -> str:
        data = await self._client.request(self.method, self.path(params), self.body(params))
        return self.render(params, data)


class CreateTodoTool(TodoApiTool[CreateTodoParams]):
    metadata = ToolMetadata(
        name="create_todo",
        description="Create a new todo item with a title, optional description, and optional completion status",
        category="todos",
    )
    params_schema = CreateTodoParams
    method = "POST"
    sends_body = True

    def path(self, params: CreateTodoParams) -> str:
        return "/todos"


class GetAllTodosTool(TodoApiTool[EmptyParams]):
    metadata = ToolMetadata(
        name="get_all_todos",
        description="Retrieve all todo items from the database",
        category="todos",
        read_only=True,
    )
    params_schema = EmptyParams
    method = "GET"

    def path(self, params: EmptyParams) -> str:
        return "/todos"


class GetTodoByIdTool(TodoApiTool[GetTodoByIdParams]):
    metadata = ToolMetadata(
        name="get_todo_by_id",
        description="Retrieve a specific todo item by its unique ID",
        category="todos",
        read_only=True,
    )
    params_schema = GetTodoByIdParams
    method = "GET"


class UpdateTodoTool(TodoApiTool[UpdateTodoParams]):
    metadata = ToolMetadata(
        name="update_todo",
        description=(
            "Update an existing todo item by its ID. "
            "You can update the title, description, or completion status"
        ),
        category="todos",
    )
    params_schema = UpdateTodoParams
    method = "PATCH"
    sends_body = True


class ToggleTodoTool(TodoApiTool[ToggleTodoParams]):
    metadata = ToolMetadata(
        name="toggle_todo_completion",
        description="Toggle the completion status of a todo item (completed <-> not completed)",
        category="todos",
    )
    params_schema = ToggleTodoParams
    method = "PATCH"

    def path(self, params: ToggleTodoParams) -> str:
        return f"/todos/{params.id}/toggle"


class DeleteTodoTool(TodoApiTool[DeleteTodoParams]):
    metadata = ToolMetadata(
        name="delete_todo",
        description="Delete a todo item by its ID",
        category="todos",
        destructive=True,
    )
    params_schema = DeleteTodoParams
    method = "DELETE"

    def render(self, params: DeleteTodoParams, data: JsonValue) -> str:
        return f"Todo with ID {params.id} has been successfully deleted."


TODO_TOOLS: tuple[type[TodoApiTool[BaseModel]], ...] = (
    CreateTodoTool,
    GetAllTodosTool,
    GetTodoByIdTool,
    UpdateTodoTool,
    ToggleTodoTool,
    DeleteTodoTool,
)
