"""MCP Tools Types - Types for tool listing and invocation."""

from typing import Annotated, Any, Literal

from pydantic import Field

from mcpgate.types.base import MCPModel, RequestParams, Result
from mcpgate.types.content import ContentBlock


class JsonSchema(MCPModel):
    """A JSON Schema object."""

    type: Literal["object"] = "object"
    properties: dict[str, Any] | None = None
    required: list[str] | None = None


class Tool(MCPModel):
    """Definition of a tool the server provides."""

    name: str
    description: str | None = None
    input_schema: Annotated[JsonSchema, Field(alias="inputSchema")]


class ListToolsRequestParams(RequestParams):
    """Parameters for tools/list request."""

    cursor: str | None = None


class ListToolsResult(Result):
    """Server's response to a tools/list request."""

    tools: list[Tool]


class CallToolRequestParams(RequestParams):
    """Parameters for tools/call request."""

    name: str
    arguments: dict[str, Any] | None = None


class CallToolResult(Result):
    """Server's response to a tools/call request."""

    content: list[ContentBlock]
    is_error: Annotated[bool, Field(alias="isError")] = False
