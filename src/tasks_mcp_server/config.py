"""Runtime configuration for the Tasks API MCP server."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from tasks_mcp_server.errors import ConfigurationError

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Settings read once at process start."""

    api_base: str
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        api_base: str | None = None,
        log_level: str | None = None,
    ) -> Settings:
        """Create settings from environment variables.

        Explicit arguments take precedence over ``API_BASE`` and ``LOG_LEVEL``.

        Raises:
            ConfigurationError: If no API base address is available.
        """
        env = os.environ if environ is None else environ
        base = (api_base or env.get("API_BASE", "")).strip().rstrip("/")
        if not base:
            raise ConfigurationError("API_BASE environment variable is required")
        level = (log_level or env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        return cls(api_base=base, log_level=level)
