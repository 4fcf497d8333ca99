"""End-to-end coverage for the FastMCP server wrapper."""

from __future__ import annotations

import json

import pytest
from fastmcp.client import Client

from tasks_mcp_server.fastmcp_adapter import build_fastmcp_app
from tasks_mcp_server.store import TaskStoreClient
from tests.conftest import API_BASE, RecordingStore


@pytest.mark.anyio()
async def test_fastmcp_server_supports_tool_discovery(
    store_client: TaskStoreClient,
) -> None:
    """The FastMCP server exposes the task toolset via the official protocol."""
    app, definitions = build_fastmcp_app(store_client)

    async with Client(app) as client:
        tools = await client.list_tools()

    assert [definition.name for definition in definitions] == [
        "add_task",
        "list_tasks",
        "update_task",
        "delete_task",
    ]
    by_name = {tool.name: tool for tool in tools}
    assert set(by_name) == {"add_task", "list_tasks", "update_task", "delete_task"}
    assert by_name["add_task"].inputSchema["required"] == ["name"]
    assert by_name["delete_task"].inputSchema["required"] == ["task_id"]


@pytest.mark.anyio()
async def test_fastmcp_server_relays_store_responses(
    store: RecordingStore, store_client: TaskStoreClient
) -> None:
    """Tool calls reach the store and return its JSON as text content."""
    app, _ = build_fastmcp_app(store_client)
    created = {"id": "abc123", "name": "Buy milk"}
    store.reply_json(created)

    async with Client(app) as client:
        result = await client.call_tool("add_task", {"name": "Buy milk"})

    assert result.is_error is False
    assert json.loads(result.content[0].text) == created
    assert store.last_request.method == "POST"
    assert str(store.last_request.url) == API_BASE


@pytest.mark.anyio()
async def test_fastmcp_server_exposes_delete_outcome(
    store: RecordingStore, store_client: TaskStoreClient
) -> None:
    """Delete results are plain text messages in both outcomes."""
    app, _ = build_fastmcp_app(store_client)

    async with Client(app) as client:
        store.reply(200)
        deleted = await client.call_tool("delete_task", {"task_id": "abc123"})
        store.reply(404)
        missing = await client.call_tool("delete_task", {"task_id": "abc123"})

    assert deleted.content[0].text == "Task abc123 deleted successfully"
    assert missing.content[0].text == "Failed to delete task abc123"
    assert missing.is_error is False


@pytest.mark.anyio()
async def test_fastmcp_propagates_error_envelopes(
    store: RecordingStore, store_client: TaskStoreClient
) -> None:
    """Transport failures surface as error-flagged results, not crashes."""
    app, _ = build_fastmcp_app(store_client)
    store.refuse_connections()

    async with Client(app) as client:
        failed = await client.call_tool(
            "list_tasks", {"sort": "-created"}, raise_on_error=False
        )
        store.reply_json({"items": []})
        recovered = await client.call_tool("list_tasks", {})

    assert failed.is_error is True
    assert "Error: Connection refused" in failed.content[0].text
    assert recovered.is_error is False


@pytest.mark.anyio()
async def test_fastmcp_reports_unknown_tools_as_error_envelopes(
    store: RecordingStore, store_client: TaskStoreClient
) -> None:
    """Calls to unregistered tools get the dispatcher's ``Error: `` text."""
    app, _ = build_fastmcp_app(store_client)

    async with Client(app) as client:
        result = await client.call_tool("frobnicate", {}, raise_on_error=False)
        store.reply_json({"items": []})
        recovered = await client.call_tool("list_tasks", {})

    assert result.is_error is True
    assert result.content[0].text == "Error: Unknown tool: frobnicate"
    assert len(store.requests) == 1
    assert recovered.is_error is False
