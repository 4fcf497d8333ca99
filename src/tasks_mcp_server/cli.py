"""Command-line interface for one-shot tool calls against the task store."""

from __future__ import annotations

import argparse
import json
import os
import sys

import anyio
from dotenv import load_dotenv

from tasks_mcp_server.config import Settings
from tasks_mcp_server.errors import ConfigurationError
from tasks_mcp_server.store import TaskStoreClient
from tasks_mcp_server.tools import build_server


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description="Call a Tasks API MCP tool once and print the result."
    )
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON.",
    )
    parser.add_argument("tool", nargs="?", help="Name of the tool to call.")
    parser.add_argument(
        "--arguments",
        default="{}",
        help="Tool arguments as a JSON object.",
    )
    parser.add_argument(
        "--api-base",
        help="Records collection URL of the task store (defaults to $API_BASE).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    load_dotenv()

    if args.catalog:
        # Discovery never touches the store.
        server = build_server(TaskStoreClient(os.environ.get("API_BASE", "")))
        print(json.dumps(server.to_catalog(), indent=2))
        return 0

    if not args.tool:
        parser.error("a tool name is required unless --catalog is given")

    try:
        arguments = json.loads(args.arguments)
    except json.JSONDecodeError as error:
        parser.error(f"--arguments is not valid JSON: {error}")
    if not isinstance(arguments, dict):
        parser.error("--arguments must be a JSON object")

    try:
        settings = Settings.from_env(api_base=args.api_base)
    except ConfigurationError as error:
        print(f"Fatal error: {error}", file=sys.stderr)
        return 1

    server = build_server(TaskStoreClient(settings.api_base))
    result = anyio.run(server.call_tool, args.tool, arguments)
    print(result.to_json())
    return 1 if result.is_error else 0


if __name__ == "__main__":
    raise SystemExit(main())
