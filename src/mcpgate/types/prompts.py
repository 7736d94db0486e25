"""MCP Prompts Types - Types for prompt listing and retrieval."""

from typing import Literal

from mcpgate.types.base import MCPModel, RequestParams, Result
from mcpgate.types.content import ContentBlock

Role = Literal["user", "assistant"]


class PromptArgument(MCPModel):
    """An argument that a prompt template accepts."""

    name: str
    description: str | None = None
    required: bool | None = None


class Prompt(MCPModel):
    """A prompt or prompt template that the server offers."""

    name: str
    description: str | None = None
    arguments: list[PromptArgument] | None = None


class ListPromptsRequestParams(RequestParams):
    """Parameters for prompts/list request."""

    cursor: str | None = None


class ListPromptsResult(Result):
    """Server's response to a prompts/list request."""

    prompts: list[Prompt]


class GetPromptRequestParams(RequestParams):
    """Parameters for prompts/get request."""

    name: str
    arguments: dict[str, str] | None = None


class PromptMessage(MCPModel):
    """Describes a message returned as part of a prompt."""

    role: Role
    content: ContentBlock


class GetPromptResult(Result):
    """Server's response to a prompts/get request."""

    description: str | None = None
    messages: list[PromptMessage]
