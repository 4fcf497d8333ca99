"""Tool definitions for the Tasks API MCP server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict

from pydantic import BaseModel, ConfigDict


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Parameter models only describe the argument shape for discovery. Arguments
    are never validated against them; unknown keys are allowed through.
    """

    model_config = ConfigDict(extra="allow")


ToolHandler = Callable[[Dict[str, Any]], Awaitable[str]]


def _property_schema(prop: Dict[str, Any]) -> Dict[str, Any]:
    """Reduce a pydantic property schema to its ``type`` and ``description``."""
    if "anyOf" in prop:
        options = [option for option in prop["anyOf"] if option.get("type") != "null"]
        prop = {**options[0], **{k: v for k, v in prop.items() if k != "anyOf"}}
    return {key: prop[key] for key in ("type", "description") if key in prop}


@dataclass(frozen=True)
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model describing the advertised parameters.
        handler: Coroutine function that performs the tool call and returns the
            text of the result.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: ToolHandler

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON object schema advertised for the tool arguments."""
        schema = self.parameters_model.model_json_schema()
        properties = {
            name: _property_schema(prop)
            for name, prop in schema.get("properties", {}).items()
        }
        return {
            "type": "object",
            "properties": properties,
            "required": list(schema.get("required", [])),
        }

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
