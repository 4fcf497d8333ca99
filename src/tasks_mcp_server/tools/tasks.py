"""Task record tools backed by the remote store."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from tasks_mcp.tools import ToolDefinition, ToolParameters
from tasks_mcp_server.store import TaskStoreClient
from tasks_mcp_server.tools.common import format_json, task_identifier, task_label

CREATE_FIELDS = ("name", "description")


class AddTaskParams(ToolParameters):
    """Parameters for the add_task tool."""

    name: str = Field(description="The concise title of the task to be added.")
    description: Optional[str] = Field(
        default=None, description="The brief summary of the task."
    )


class ListTasksParams(ToolParameters):
    """Parameters for the list_tasks tool."""

    filter: Optional[str] = Field(
        default=None,
        description=(
            "PocketBase filter string to select specific records (e.g., "
            "(done=false) for pending tasks). Use parentheses for conditions."
        ),
    )
    sort: Optional[str] = Field(
        default=None,
        description=(
            "PocketBase sort string for ordering results (e.g., '-created' for "
            "newest first, 'name' for alphabetical)."
        ),
    )
    page: Optional[int] = Field(
        default=None,
        description="The page number for paginated results (defaults to 1).",
    )


class UpdateTaskParams(ToolParameters):
    """Parameters for the update_task tool."""

    task_id: str = Field(description="The ID of the task to be updated.")
    name: Optional[str] = Field(default=None, description="The new title of the task.")
    description: Optional[str] = Field(
        default=None, description="The new description of the task."
    )
    done: Optional[bool] = Field(
        default=None, description="A flag that indicates if the task is done."
    )
    archived: Optional[bool] = Field(
        default=None, description="A flag that specifies if the task is archived."
    )


class DeleteTaskParams(ToolParameters):
    """Parameters for the delete_task tool."""

    task_id: str = Field(description="The ID of the task to be deleted.")


def add_task_tool(store: TaskStoreClient) -> ToolDefinition:
    """Create the add_task tool definition."""

    async def handler(arguments: dict[str, Any]) -> str:
        # Absent keys stay absent in the request body.
        fields = {key: arguments[key] for key in CREATE_FIELDS if key in arguments}
        return format_json(await store.create_task(fields))

    return ToolDefinition(
        name="add_task",
        description="Creates a new to-do item on the list. Requires the name parameter.",
        parameters_model=AddTaskParams,
        handler=handler,
    )


def list_tasks_tool(store: TaskStoreClient) -> ToolDefinition:
    """Create the list_tasks tool definition."""

    async def handler(arguments: dict[str, Any]) -> str:
        data = await store.list_tasks(
            filter_expression=arguments.get("filter"),
            sort=arguments.get("sort"),
            page=arguments.get("page"),
        )
        return format_json(data)

    return ToolDefinition(
        name="list_tasks",
        description=(
            "Retrieves tasks, allowing for filtering and sorting via PocketBase "
            "query syntax. Use 'filter' for specific criteria (e.g., pending tasks)."
        ),
        parameters_model=ListTasksParams,
        handler=handler,
    )


def update_task_tool(store: TaskStoreClient) -> ToolDefinition:
    """Create the update_task tool definition."""

    async def handler(arguments: dict[str, Any]) -> str:
        changes = {key: value for key, value in arguments.items() if key != "task_id"}
        data = await store.update_task(task_identifier(arguments), changes)
        return format_json(data)

    return ToolDefinition(
        name="update_task",
        description=(
            "Updates the task identified by task_id. Allows changing name, "
            "description, done, or archived status."
        ),
        parameters_model=UpdateTaskParams,
        handler=handler,
    )


def delete_task_tool(store: TaskStoreClient) -> ToolDefinition:
    """Create the delete_task tool definition."""

    async def handler(arguments: dict[str, Any]) -> str:
        task_id = task_identifier(arguments)
        label = task_label(task_id)
        if await store.delete_task(task_id):
            return f"Task {label} deleted successfully"
        return f"Failed to delete task {label}"

    return ToolDefinition(
        name="delete_task",
        description="Removes a specific task from the list using its ID.",
        parameters_model=DeleteTaskParams,
        handler=handler,
    )
