"""
Tests for JSON-RPC TypeAdapter message discrimination.

Given a raw JSON line, the adapter must tell a Request from a Notification
from a ResultResponse from an ErrorResponse. Discrimination is based on field
presence:
- Request:        has 'id' AND 'method'
- Notification:   has 'method' but NO 'id'
- ResultResponse: has 'id' AND 'result' (no 'method')
- ErrorResponse:  has 'error' field
"""

from typing import Any

import pytest
from pydantic import ValidationError

from mcpgate.types.json_rpc import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ErrorData,
    JSONRPCErrorResponse,
    JSONRPCMessage,
    JSONRPCMessageAdapter,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResultResponse,
)


@pytest.mark.parametrize(
    ("raw", "expected_type"),
    [
        # Requests: 'id' + 'method'
        ({"jsonrpc": "2.0", "id": 1, "method": "ping"}, JSONRPCRequest),
        ({"jsonrpc": "2.0", "id": "str-id", "method": "tools/call", "params": {"name": "x"}}, JSONRPCRequest),
        ({"jsonrpc": "2.0", "id": 0, "method": "tools/call", "params": ["by", "position"]}, JSONRPCRequest),
        # Notifications: 'method', no 'id'
        ({"jsonrpc": "2.0", "method": "notifications/initialized"}, JSONRPCNotification),
        ({"jsonrpc": "2.0", "method": "notifications/cancelled", "params": {}}, JSONRPCNotification),
        # A null id is read as a notification rather than a request
        ({"jsonrpc": "2.0", "id": None, "method": "ping"}, JSONRPCNotification),
        # Result responses: 'id' + 'result', no 'method'
        ({"jsonrpc": "2.0", "id": 1, "result": {}}, JSONRPCResultResponse),
        # Error responses: has 'error'
        (
            {"jsonrpc": "2.0", "id": 1, "error": {"code": METHOD_NOT_FOUND, "message": "Method not found"}},
            JSONRPCErrorResponse,
        ),
        (
            {"jsonrpc": "2.0", "id": None, "error": {"code": INVALID_PARAMS, "message": "Invalid params"}},
            JSONRPCErrorResponse,
        ),
    ],
)
def test_adapter_returns_correct_type(raw: dict[str, Any], expected_type: type[JSONRPCMessage]) -> None:
    message = JSONRPCMessageAdapter.validate_python(raw)
    assert isinstance(message, expected_type)


@pytest.mark.parametrize(
    "line",
    [
        "not json",
        "[1, 2, 3]",
        '"just a string"',
        '{"jsonrpc": "1.0", "id": 1, "method": "ping"}',
        '{"jsonrpc": "2.0", "id": 1.5, "method": "ping"}',
        '{"jsonrpc": "2.0", "id": true, "method": "ping"}',
        '{"jsonrpc": "2.0", "id": 1, "method": 7}',
    ],
)
def test_adapter_rejects_invalid_lines(line: str) -> None:
    with pytest.raises(ValidationError):
        JSONRPCMessageAdapter.validate_json(line)


def test_request_id_keeps_its_type() -> None:
    int_request = JSONRPCMessageAdapter.validate_json('{"jsonrpc": "2.0", "id": 5, "method": "ping"}')
    str_request = JSONRPCMessageAdapter.validate_json('{"jsonrpc": "2.0", "id": "5", "method": "ping"}')

    assert isinstance(int_request, JSONRPCRequest) and int_request.id == 5
    assert isinstance(str_request, JSONRPCRequest) and str_request.id == "5"


def test_wire_format_omits_unset_optionals() -> None:
    notification = JSONRPCNotification(method="test/notification", params={"message": "Processing text"})
    error = JSONRPCErrorResponse(id=3, error=ErrorData(code=METHOD_NOT_FOUND, message="Method not found"))

    assert notification.model_dump_json(by_alias=True, exclude_none=True) == (
        '{"jsonrpc":"2.0","method":"test/notification","params":{"message":"Processing text"}}'
    )
    assert error.model_dump_json(by_alias=True, exclude_none=True) == (
        '{"jsonrpc":"2.0","id":3,"error":{"code":-32601,"message":"Method not found"}}'
    )
