"""Core tool abstractions."""

from .base import BaseTool, EmptyParams, ToolMetadata

__all__ = ["BaseTool", "EmptyParams", "ToolMetadata"]
