"""MCP Initialize Types - Types for the initialize handshake."""

from typing import Annotated

from pydantic import Field

from mcpgate.types.base import RequestParams, Result
from mcpgate.types.common import ClientCapabilities, Implementation, ServerCapabilities


class InitializeRequestParams(RequestParams):
    """Parameters for the initialize request."""

    protocol_version: Annotated[str, Field(alias="protocolVersion")]
    capabilities: ClientCapabilities
    client_info: Annotated[Implementation, Field(alias="clientInfo")]


class InitializeResult(Result):
    """Server's response to an initialize request."""

    protocol_version: Annotated[str, Field(alias="protocolVersion")]
    capabilities: ServerCapabilities
    server_info: Annotated[Implementation, Field(alias="serverInfo")]
