"""Middleware chain for tool execution."""

from .logging import LoggingMiddleware
from .middleware import Context, Middleware, Next, compose

__all__ = ["Context", "LoggingMiddleware", "Middleware", "Next", "compose"]
