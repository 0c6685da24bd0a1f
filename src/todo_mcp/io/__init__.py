"""Outbound I/O: the Todo REST API client."""

from .http import ApiKeyAuth, HttpMethod, TodoApiClient

__all__ = ["ApiKeyAuth", "HttpMethod", "TodoApiClient"]
