"""Adapters for exposing the task tools via FastMCP."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import NotFoundError, ToolError
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as FastMCPToolResult
from mcp.types import CallToolRequestParams, TextContent

from tasks_mcp import __version__
from tasks_mcp.server import MCPServer, ToolResult, UnknownToolError
from tasks_mcp.tools import ToolDefinition
from tasks_mcp_server.store import TaskStoreClient
from tasks_mcp_server.tools import build_server

SERVER_NAME = "tasks-api-server"


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition, server: MCPServer) -> None:
        """Create a FastMCP tool wrapper dispatching through ``server``."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            output_schema=None,
            tags=set(),
        )
        self._definition = definition
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> FastMCPToolResult:
        """Dispatch the call and translate the envelope for FastMCP.

        Error envelopes are raised as :class:`ToolError` so the protocol
        response is flagged ``isError`` with the envelope text.
        """
        result = await self._server.call_tool(self._definition.name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return FastMCPToolResult(
            content=[
                TextContent(type="text", text=segment["text"])
                for segment in result.content
            ]
        )


class UnknownToolMiddleware(Middleware):
    """Report calls to unregistered tools with the dispatcher's error text.

    FastMCP rejects such calls before any tool runs; the rejection is
    re-raised as a :class:`ToolError` carrying ``Error: Unknown tool: <name>``.
    """

    async def on_call_tool(
        self,
        context: MiddlewareContext[CallToolRequestParams],
        call_next: CallNext[CallToolRequestParams, FastMCPToolResult],
    ) -> FastMCPToolResult:
        try:
            return await call_next(context)
        except NotFoundError:
            result = ToolResult.from_error(UnknownToolError(context.message.name))
            raise ToolError(result.text) from None


def to_fastmcp_tools(server: MCPServer) -> list[Tool]:
    """Convert the registered tool definitions into FastMCP-compatible tools."""
    return [ToolDefinitionAdapter(definition, server) for definition in server.list_tools()]


def build_fastmcp_app(store: TaskStoreClient) -> tuple[FastMCP, Sequence[ToolDefinition]]:
    """Create a FastMCP server instance with all task tools registered."""
    app = FastMCP(
        name=SERVER_NAME,
        version=__version__,
        instructions="Task list management backed by a PocketBase records API.",
    )
    app.add_middleware(UnknownToolMiddleware())
    server = build_server(store)
    for tool in to_fastmcp_tools(server):
        app.add_tool(tool)
    return app, server.list_tools()
