"""MCP Common Types - Shared types used across the protocol."""

from typing import Annotated, Any

from pydantic import Field

from mcpgate.types.base import MCPModel


class Implementation(MCPModel):
    """Describes the name and version of an MCP implementation."""

    name: str
    version: str


class ClientCapabilities(MCPModel):
    """Capabilities that a client may support."""

    experimental: dict[str, Any] | None = None
    roots: dict[str, Any] | None = None
    sampling: dict[str, Any] | None = None


class ListChangedCapability(MCPModel):
    """Whether the server will emit list_changed notifications for a capability group."""

    list_changed: Annotated[bool | None, Field(alias="listChanged")] = None


class ServerCapabilities(MCPModel):
    """Capabilities that a server may support."""

    experimental: dict[str, Any] | None = None
    prompts: ListChangedCapability | None = None
    tools: ListChangedCapability | None = None
