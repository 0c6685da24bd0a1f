"""Command-line entry point: `todo-mcp-server` / `python -m todo_mcp`.

Startup order: settings are loaded first, so a missing API_KEY exits with
status 1 before any tool is registered or any transport is opened.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from todo_mcp.ext.mcp import SERVER_NAME, SERVER_VERSION, serve_mcp
from todo_mcp.foundation.config import load_settings
from todo_mcp.foundation.errors import ConfigError
from todo_mcp.io import TodoApiClient
from todo_mcp.runtime.observability import configure_logging, get_logger
from todo_mcp.tools import create_registry

log = get_logger("todo_mcp.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server exposing a remote Todo REST API as tools.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {SERVER_VERSION}")
    parser.add_argument(
        "--transport",
        choices=("stdio", "sse", "streamable-http"),
        default="stdio",
        help="MCP transport (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host for HTTP transports")
    parser.add_argument("--port", type=int, default=8080, help="Bind port for HTTP transports")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
        help="Override TODO_MCP_LOG_LEVEL",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        print(e, file=sys.stderr)
        raise SystemExit(1) from None

    configure_logging(format=settings.logging.format, level=args.log_level or settings.logging.level)
    log.info("starting", api_url=settings.api_url, transport=args.transport)

    client = TodoApiClient.from_settings(settings)
    registry = create_registry(client)
    serve_mcp(registry, client=client, transport=args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
