"""Custom error types for MCP tooling."""

from __future__ import annotations

from typing import NoReturn


class MCPError(Exception):
    """Tool failure tagged with a short error type.

    ``str(error)`` is the bare message, which is what ends up in the text of
    an error envelope; ``error_type`` goes to the server log.
    """

    def __init__(self, error_type: str, message: str) -> None:
        """Create a typed MCP error."""
        super().__init__(message)
        self.error_type = error_type


class ConfigurationError(MCPError):
    """Raised when the server cannot be configured at startup."""

    def __init__(self, message: str) -> None:
        """Create a configuration error."""
        super().__init__("ConfigurationError", message)


def raise_mcp_error(error_type: str, message: str) -> NoReturn:
    """Raise an :class:`MCPError` of the given type."""
    raise MCPError(error_type=error_type, message=message)
