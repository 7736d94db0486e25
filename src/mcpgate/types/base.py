"""MCP Base Types - Core type definitions for MCP protocol."""

from typing import Annotated, Any, Final

from pydantic import BaseModel, ConfigDict, Field

# The one protocol revision this server speaks. It is advertised as-is in every
# initialize result, whatever the client asked for.
SUPPORTED_PROTOCOL_VERSION: Final[str] = "2024-11-05"


class MCPModel(BaseModel):
    """Base class for all MCP domain types. Allows extra fields for forward compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RequestParams(MCPModel):
    """Base class for MCP request parameters with _meta support."""

    meta: Annotated[dict[str, Any] | None, Field(alias="_meta")] = None


class Result(MCPModel):
    """Base class for MCP results with _meta support."""

    meta: Annotated[dict[str, Any] | None, Field(alias="_meta")] = None
