"""Tool registration helpers for the Tasks API MCP server."""

from __future__ import annotations

from tasks_mcp.server import MCPServer
from tasks_mcp.tools import ToolDefinition
from tasks_mcp_server.store import TaskStoreClient
from tasks_mcp_server.tools.tasks import (
    add_task_tool,
    delete_task_tool,
    list_tasks_tool,
    update_task_tool,
)


def build_tools(store: TaskStoreClient) -> list[ToolDefinition]:
    """Instantiate all tool definitions with the provided store client."""
    return [
        add_task_tool(store),
        list_tasks_tool(store),
        update_task_tool(store),
        delete_task_tool(store),
    ]


def build_server(store: TaskStoreClient) -> MCPServer:
    """Create a dispatcher with the full task toolset registered."""
    server = MCPServer()
    server.register_tools(*build_tools(store))
    return server
