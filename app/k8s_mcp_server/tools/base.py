"""
Base tool definitions.

Defines the static tool description used for registration and the
exceptions tool handlers raise.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ToolArgument:
    """One argument of a tool's input schema."""

    name: str
    description: str
    json_type: str | list[str] = "string"


@dataclass(frozen=True)
class ToolSpec:
    """
    Static description of an MCP tool.

    Attributes:
        name: MCP tool name (e.g., 'list-pods')
        title: Human readable title
        description: Tool description shown to the LLM
        required: Arguments that must be present and non-empty
        optional: Arguments that may be omitted
    """

    name: str
    title: str
    description: str
    required: tuple[ToolArgument, ...] = ()
    optional: tuple[ToolArgument, ...] = ()

    @property
    def argument_names(self) -> list[str]:
        return [arg.name for arg in (*self.required, *self.optional)]

    @property
    def required_names(self) -> list[str]:
        return [arg.name for arg in self.required]

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool arguments."""
        properties = {
            arg.name: {"type": arg.json_type, "description": arg.description}
            for arg in (*self.required, *self.optional)
        }
        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if self.required:
            schema["required"] = self.required_names
        return schema


class ToolError(Exception):
    """Base exception for tool call failures reported to the client."""

    pass


class ToolArgumentError(ToolError):
    """Raised when a required tool argument is missing or empty."""

    pass


class UnknownToolError(ToolError):
    """Raised when a tool name has no handler."""

    def __init__(self, name: str):
        super().__init__(f"unknown tool: {name}")
        self.name = name


class ToolCallError(ToolError):
    """Raised when the cluster call behind a tool fails."""

    pass
