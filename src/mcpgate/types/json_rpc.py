"""Minimum amount of base models to represent the JSON-RPC 2.0 messages used by MCP."""

from typing import Annotated, Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

JSONRPC_VERSION: Final[str] = "2.0"

METHOD_NOT_FOUND: Final[int] = -32601
INVALID_PARAMS: Final[int] = -32602
INTERNAL_ERROR: Final[int] = -32603

RequestId = Annotated[int, Field(strict=True)] | str

# By-name params are the norm for MCP, but JSON-RPC also allows by-position
# params. Accepting both here lets the handlers reject a list as invalid params
# instead of failing the whole frame.
Params = dict[str, Any] | list[Any] | None


class JSONRPCBase(BaseModel):
    """Base class for all JSON-RPC messages."""

    model_config = ConfigDict(extra="allow")

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION


class JSONRPCRequest(JSONRPCBase):
    """A request that expects a response."""

    id: RequestId
    method: str
    params: Params = None


class JSONRPCNotification(JSONRPCBase):
    """A notification which does not expect a response."""

    method: str
    params: Params = None


class ErrorData(BaseModel):
    """Error information in a JSON-RPC error response."""

    model_config = ConfigDict(extra="allow")

    code: int
    message: str
    data: Any | None = None


class JSONRPCResultResponse(JSONRPCBase):
    """A successful (non-error) response to a request."""

    id: RequestId
    result: dict[str, Any]


class JSONRPCErrorResponse(JSONRPCBase):
    """A response to a request that indicates an error occurred."""

    id: RequestId | None = None
    error: ErrorData


JSONRPCResponse = JSONRPCResultResponse | JSONRPCErrorResponse
JSONRPCMessage = JSONRPCRequest | JSONRPCNotification | JSONRPCResponse


def _message_kind(value: Any) -> str | None:
    """Discriminate on field presence: requests carry both 'id' and 'method'.

    A method call whose id is null is read as a notification, so it gets no
    reply and does not end the connection.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump()
    if not isinstance(value, dict):
        return None
    if "method" in value:
        return "request" if value.get("id") is not None else "notification"
    if "error" in value:
        return "error"
    return "result"


JSONRPCMessageAdapter: TypeAdapter[JSONRPCMessage] = TypeAdapter(
    Annotated[
        Annotated[JSONRPCRequest, Tag("request")]
        | Annotated[JSONRPCNotification, Tag("notification")]
        | Annotated[JSONRPCResultResponse, Tag("result")]
        | Annotated[JSONRPCErrorResponse, Tag("error")],
        Discriminator(_message_kind),
    ]
)
