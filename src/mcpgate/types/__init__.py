from mcpgate.types.base import SUPPORTED_PROTOCOL_VERSION, MCPModel, RequestParams, Result
from mcpgate.types.common import ClientCapabilities, Implementation, ListChangedCapability, ServerCapabilities
from mcpgate.types.content import ContentBlock, ImageContent, TextContent
from mcpgate.types.initialize import InitializeRequestParams, InitializeResult
from mcpgate.types.json_rpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ErrorData,
    JSONRPCErrorResponse,
    JSONRPCMessage,
    JSONRPCMessageAdapter,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    JSONRPCResultResponse,
    RequestId,
)
from mcpgate.types.prompts import (
    GetPromptRequestParams,
    GetPromptResult,
    ListPromptsRequestParams,
    ListPromptsResult,
    Prompt,
    PromptArgument,
    PromptMessage,
    Role,
)
from mcpgate.types.tools import (
    CallToolRequestParams,
    CallToolResult,
    JsonSchema,
    ListToolsRequestParams,
    ListToolsResult,
    Tool,
)

__all__ = [
    "SUPPORTED_PROTOCOL_VERSION",
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "METHOD_NOT_FOUND",
    "CallToolRequestParams",
    "CallToolResult",
    "ClientCapabilities",
    "ContentBlock",
    "ErrorData",
    "GetPromptRequestParams",
    "GetPromptResult",
    "ImageContent",
    "Implementation",
    "InitializeRequestParams",
    "InitializeResult",
    "JSONRPCErrorResponse",
    "JSONRPCMessage",
    "JSONRPCMessageAdapter",
    "JSONRPCNotification",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "JSONRPCResultResponse",
    "JsonSchema",
    "ListChangedCapability",
    "ListPromptsRequestParams",
    "ListPromptsResult",
    "ListToolsRequestParams",
    "ListToolsResult",
    "MCPModel",
    "Prompt",
    "PromptArgument",
    "PromptMessage",
    "RequestId",
    "RequestParams",
    "Result",
    "Role",
    "ServerCapabilities",
    "TextContent",
    "Tool",
]
