"""Shared helpers for MCP tools."""

from __future__ import annotations

import json
from typing import Any

MISSING_TASK_ID = "<missing task_id>"


def format_json(data: Any) -> str:
    """Pretty-print a store response for a text content segment."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def task_identifier(arguments: dict[str, Any]) -> str:
    """Return the ``task_id`` argument as text.

    A missing identifier is not rejected here. The request goes out with an
    empty record segment, so the store answers for it, and result messages
    name the task as ``<missing task_id>``.
    """
    task_id = arguments.get("task_id")
    return "" if task_id is None else str(task_id)


def task_label(task_id: str) -> str:
    """Name a task in result messages, with a placeholder for a missing id."""
    return task_id or MISSING_TASK_ID
