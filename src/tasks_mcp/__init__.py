"""tasks_mcp package initialization."""

__version__ = "1.0.0"

from tasks_mcp.server import MCPServer, ToolResult, UnknownToolError  # noqa: E402
from tasks_mcp.tools import ToolDefinition, ToolParameters  # noqa: E402

__all__ = [
    "MCPServer",
    "ToolDefinition",
    "ToolParameters",
    "ToolResult",
    "UnknownToolError",
    "__version__",
]
