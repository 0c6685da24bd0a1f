"""Bridge between BaseTool schemas and MCP tool definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from todo_mcp.foundation.core import BaseTool


def get_tool_schema(tool: BaseTool[BaseModel]) -> dict[str, object]:
    """JSON Schema of the tool's params, stripped of pydantic titles.

    Property names are the wire (alias) names, e.g. `isCompleted`.
    """
    schema = tool.params_schema.model_json_schema(by_alias=True)
    schema.pop("title", None)
    schema.pop("$defs", None)
    schema["properties"] = get_tool_properties(tool, schema)
    schema.setdefault("type", "object")
    return schema


def get_tool_properties(tool: BaseTool[BaseModel], schema: dict[str, object] | None = None) -> dict[str, dict[str, object]]:
    """Cleaned property definitions (no per-property titles)."""
    schema = schema or tool.params_schema.model_json_schema(by_alias=True)
    properties: dict[str, dict[str, object]] = schema.get("properties", {})  # type: ignore[assignment]
    return {
        name: {k: v for k, v in prop.items() if k != "title"}
        for name, prop in properties.items()
    }


def get_required_params(tool: BaseTool[BaseModel]) -> list[str]:
    return tool.params_schema.model_json_schema(by_alias=True).get("required", [])
