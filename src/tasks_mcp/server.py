"""Tool registry and dispatcher for the Tasks API MCP server.

The server keeps the static tool catalog and turns every invocation into exactly
one :class:`ToolResult`. It is free of transport details so that the same
dispatcher can sit behind FastMCP, the one-shot CLI or a test harness.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from tasks_mcp.tools import ToolDefinition

logger = logging.getLogger(__name__)


class UnknownToolError(LookupError):
    """Raised when an invocation names a tool that is not registered."""

    error_type = "UnknownTool"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


@dataclass
class ToolResult:
    """Result envelope returned for every tool invocation.

    Attributes:
        content: Ordered text segments of the result.
        is_error: Whether the invocation failed.

    """

    content: list[dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def from_text(cls, text: str) -> ToolResult:
        """Build a successful envelope holding a single text segment."""
        return cls(content=[{"type": "text", "text": text}])

    @classmethod
    def from_error(cls, error: BaseException) -> ToolResult:
        """Build an error-flagged envelope describing ``error``."""
        return cls(content=[{"type": "text", "text": f"Error: {error}"}], is_error=True)

    @property
    def text(self) -> str:
        """Concatenated text of all content segments."""
        return "".join(segment["text"] for segment in self.content)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the envelope in MCP ``CallToolResult`` shape.

        Returns:
            Mapping with ``content`` and, only for failures, ``isError``.

        """
        payload: dict[str, Any] = {"content": [dict(item) for item in self.content]}
        if self.is_error:
            payload["isError"] = True
        return payload

    def to_json(self) -> str:
        """Serialize the result to JSON.

        Returns:
            JSON representation of the tool result.

        """
        return json.dumps(self.to_dict())


class MCPServer:
    """In-memory registry and dispatcher for MCP tools.

    The server tracks registered tools in registration order and provides the
    single error boundary for invocations: whatever a handler raises is turned
    into an error-flagged :class:`ToolResult`.
    """

    def __init__(self) -> None:
        """Initialize an empty server registry."""
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List the names of registered tools.

        Returns:
            Tool names in registration order.

        """
        return list(self._tools)

    def list_tools(self) -> list[ToolDefinition]:
        """Return the registered tool descriptors in registration order."""
        return list(self._tools.values())

    def resolve(self, name: str) -> ToolDefinition:
        """Look up a registered tool.

        Raises:
            UnknownToolError: If the tool name is not registered.

        """
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> ToolResult:
        """Execute a registered tool and wrap the outcome in a result envelope.

        Args:
            name: Name of the tool to execute.
            arguments: Argument bag forwarded to the tool handler unexamined.

        Returns:
            ToolResult holding the handler text, or an error-flagged envelope
            if resolution or the handler raised.

        """
        logger.debug("Calling tool %s", name)
        try:
            tool = self.resolve(name)
            text = await tool.handler(dict(arguments or {}))
        except Exception as exc:
            error_type = getattr(exc, "error_type", type(exc).__name__)
            logger.warning("Tool %s failed [%s]: %s", name, error_type, exc)
            return ToolResult.from_error(exc)
        return ToolResult.from_text(text)

    def to_catalog(self) -> dict[str, dict[str, Any]]:
        """Produce a catalog for discovery.

        Returns:
            Mapping of tool names to their metadata.

        """
        return {name: tool.metadata() for name, tool in self._tools.items()}
