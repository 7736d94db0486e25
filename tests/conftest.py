from typing import Any

import pytest

from mcpgate.types.json_rpc import RequestId


@pytest.fixture
def anyio_backend():
    return "asyncio"


class RecordingConnection:
    """Connection that keeps every outgoing message, in order, as wire-shaped dicts."""

    def __init__(self) -> None:
        self.messages: list[dict[str, Any]] = []

    async def reply(self, request_id: RequestId, result: dict[str, Any]) -> None:
        self.messages.append({"jsonrpc": "2.0", "id": request_id, "result": result})

    async def reply_with_error(self, request_id: RequestId, code: int, message: str) -> None:
        self.messages.append({"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}})

    async def notify(self, method: str, params: dict[str, Any] | None = None) -> None:
        self.messages.append({"jsonrpc": "2.0", "method": method, "params": params})


@pytest.fixture
def connection() -> RecordingConnection:
    return RecordingConnection()
