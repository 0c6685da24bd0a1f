"""Structured logging to stderr.

Events are a name plus key/value context, rendered either for humans
(`console`) or as JSON lines (`json`). Nothing is ever written to stdout,
which carries the MCP stdio stream.

Quick Start:
    >>> configure_logging(format="json", level="DEBUG")
    >>> log = get_logger("todo_mcp.http").bind(method="GET")
    >>> log.info("api response", path="/todos", status=200)
"""

from __future__ import annotations

import logging
import sys
import time
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol, TextIO

import orjson

from todo_mcp.foundation.errors import JsonDict, JsonValue

_RESET, _DIM, _BOLD, _CYAN = "\033[0m", "\033[2m", "\033[1m", "\033[36m"
_LEVEL_COLORS = {
    "debug": _DIM,
    "info": "\033[32m",
    "warning": "\033[33m",
    "error": "\033[31m",
    "critical": "\033[1;31m",
}


@dataclass(frozen=True, slots=True)
class LogEntry:
    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)


class LogRenderer(Protocol):
    def render(self, entry: LogEntry) -> None: ...


def _console_value(v: object) -> str:
    if isinstance(v, str):
        return f'"{v}"' if " " in v else v
    return repr(v) if isinstance(v, (dict, list)) else str(v)


@dataclass(slots=True)
class ConsoleRenderer:
    """`12:00:01.123 [info] tool succeeded duration_ms=3.1 tool=create_todo`

    Args:
        output: Stream to write to (default: sys.stderr at write time)
        colors: ANSI colors; None enables them when the stream is a TTY
    """

    output: TextIO | None = None
    colors: bool | None = None

    def format(self, entry: LogEntry) -> str:
        stamp = entry.time.strftime("%H:%M:%S.%f")[:-3]
        items = sorted((k, v) for k, v in entry.context.items() if k != "exc_info")
        if self._colored():
            level = f"{_LEVEL_COLORS.get(entry.level, '')}[{entry.level}]{_RESET}"
            parts = [f"{_DIM}{stamp}{_RESET}", level, f"{_BOLD}{entry.event}{_RESET}"]
            parts += [f"{_CYAN}{k}{_RESET}={_console_value(v)}" for k, v in items]
        else:
            parts = [stamp, f"[{entry.level}]", entry.event]
            parts += [f"{k}={_console_value(v)}" for k, v in items]
        line = " ".join(parts)
        if exc := entry.context.get("exc_info"):
            line += f"\n{str(exc).rstrip()}"
        return line

    def _colored(self) -> bool:
        if self.colors is not None:
            return self.colors
        return getattr(self.output or sys.stderr, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        print(self.format(entry), file=self.output or sys.stderr, flush=True)


@dataclass(slots=True)
class JsonRenderer:
    """One JSON object per line: timestamp, level, event, then the context."""

    output: TextIO | None = None

    def format(self, entry: LogEntry) -> str:
        record = {"timestamp": entry.time.isoformat(), "level": entry.level, "event": entry.event, **entry.context}
        return orjson.dumps(record, option=orjson.OPT_NON_STR_KEYS, default=str).decode()

    def render(self, entry: LogEntry) -> None:
        print(self.format(entry), file=self.output or sys.stderr, flush=True)


class NoOpRenderer:
    def render(self, entry: LogEntry) -> None:
        pass


_renderer: LogRenderer = ConsoleRenderer()
_level: int = logging.INFO


@dataclass(frozen=True, slots=True)
class BoundLogger:
    """Logger carrying context that is merged into every event.

    `renderer` and `level` fall back to the process-wide configuration.
    """

    context: JsonDict = field(default_factory=dict)
    renderer: LogRenderer | None = None
    level: int | None = None

    def bind(self, **kw: JsonValue) -> BoundLogger:
        return BoundLogger({**self.context, **kw}, self.renderer, self.level)

    def log(self, level: int, event: str, **kw: JsonValue) -> None:
        if level < (_level if self.level is None else self.level):
            return
        entry = LogEntry(time.time(), logging.getLevelName(level).lower(), event, {**self.context, **kw})
        (self.renderer or _renderer).render(entry)

    def debug(self, event: str, **kw: JsonValue) -> None:
        self.log(logging.DEBUG, event, **kw)

    def info(self, event: str, **kw: JsonValue) -> None:
        self.log(logging.INFO, event, **kw)

    def warning(self, event: str, **kw: JsonValue) -> None:
        self.log(logging.WARNING, event, **kw)

    def error(self, event: str, **kw: JsonValue) -> None:
        self.log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """ERROR event with the current traceback as `exc_info`."""
        self.log(logging.ERROR, event, exc_info=traceback.format_exc(), **kw)


def configure_logging(
    format: str = "console",  # noqa: A002
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Set the process-wide renderer ("console", "json" or "none") and level.

    Standard-library loggers (httpx, fastmcp) are sent to the same stream.
    """
    global _renderer, _level
    match format:
        case "console":
            renderer: LogRenderer = ConsoleRenderer(output, colors)
        case "json":
            renderer = JsonRenderer(output)
        case "none":
            renderer = NoOpRenderer()
        case _:
            raise ValueError(f"Unknown log format: {format!r}")
    _renderer = renderer
    _level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    logging.basicConfig(stream=output or sys.stderr, level=_level)
    return renderer


def get_logger(name: str | None = None, **context: JsonValue) -> BoundLogger:
    """Logger with `logger=<name>` in its context."""
    return BoundLogger({**context, "logger": name} if name else context)
