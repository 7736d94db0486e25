"""Encoding of outcomes into JSON-RPC responses and result payloads.

Protocol errors become JSON-RPC error responses. Application errors (a
callback that raised, a rate limit that denied the call) are ordinary results
that carry the error text in their content.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from mcpgate.types.content import TextContent
from mcpgate.types.json_rpc import ErrorData, JSONRPCErrorResponse, JSONRPCNotification, JSONRPCResultResponse, RequestId
from mcpgate.types.prompts import GetPromptResult, PromptMessage
from mcpgate.types.tools import CallToolResult

RATE_LIMIT_EXCEEDED = "rate limit exceeded"


def dump_result(result: BaseModel | dict[str, Any] | None) -> dict[str, Any]:
    """Serialize a result model the way it goes on the wire."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(result, dict):
        return result
    return {}


def result_response(request_id: RequestId, result: dict[str, Any]) -> JSONRPCResultResponse:
    return JSONRPCResultResponse(id=request_id, result=result)


def error_response(request_id: RequestId | None, code: int, message: str) -> JSONRPCErrorResponse:
    return JSONRPCErrorResponse(id=request_id, error=ErrorData(code=code, message=message))


def notification(method: str, params: dict[str, Any] | None = None) -> JSONRPCNotification:
    return JSONRPCNotification(method=method, params=params)


def tool_error(message: str) -> CallToolResult:
    """A tools/call result reporting that the tool failed."""
    return CallToolResult(content=[TextContent(text=message)], is_error=True)


def prompt_error(message: str) -> GetPromptResult:
    """A prompts/get result reporting that the prompt failed.

    Prompt results have no error flag, so the error text is delivered as the
    single assistant message.
    """
    return GetPromptResult(messages=[PromptMessage(role="assistant", content=TextContent(text=message))])
