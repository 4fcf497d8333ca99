"""Model Context Protocol server for a remote task record store."""

from tasks_mcp_server.config import Settings
from tasks_mcp_server.errors import ConfigurationError, MCPError
from tasks_mcp_server.store import TaskStoreClient

__all__ = [
    "ConfigurationError",
    "MCPError",
    "Settings",
    "TaskStoreClient",
]
