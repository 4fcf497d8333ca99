"""Entry point for the Tasks API MCP server."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from tasks_mcp_server.config import Settings
from tasks_mcp_server.errors import ConfigurationError
from tasks_mcp_server.fastmcp_adapter import build_fastmcp_app
from tasks_mcp_server.store import TaskStoreClient

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "http", "streamable-http", "sse")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server."""
    parser = argparse.ArgumentParser(description="Tasks API MCP server")
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="MCP transport to serve on.",
    )
    parser.add_argument("--host", help="Bind address for network transports.")
    parser.add_argument("--port", type=int, help="Port for network transports.")
    parser.add_argument("--path", help="URL path for network transports.")
    parser.add_argument(
        "--api-base",
        help="Records collection URL of the task store (defaults to $API_BASE).",
    )
    parser.add_argument(
        "--log-level", help="Logging level (defaults to $LOG_LEVEL or INFO)."
    )
    return parser


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Load configuration, build the FastMCP app and serve it."""
    args = build_parser().parse_args(argv)
    load_dotenv()

    try:
        settings = Settings.from_env(api_base=args.api_base, log_level=args.log_level)
    except ConfigurationError as error:
        print(f"Fatal error: {error}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    app, _ = build_fastmcp_app(TaskStoreClient(settings.api_base))

    run_options: dict[str, object] = {}
    if args.transport != "stdio":
        for option in ("host", "port", "path"):
            value = getattr(args, option)
            if value is not None:
                run_options[option] = value

    logger.info("Tasks API MCP Server running on %s", args.transport)
    app.run(transport=args.transport, **run_options)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
