"""Connection implementation backed by a memory object stream."""

from __future__ import annotations

import logging
from typing import Any

import anyio
from anyio.streams.memory import MemoryObjectSendStream

from mcpgate.responses import error_response, notification, result_response
from mcpgate.types.json_rpc import JSONRPCMessage, RequestId

logger = logging.getLogger(__name__)


class StreamConnection:
    """Connection that queues outgoing messages on a memory channel.

    The transport's writer task drains the other end of the channel, so every
    message from every request goes out through one writer, one line at a time.
    A message that cannot be queued because the writer is gone is logged and
    dropped.
    """

    def __init__(self, send_stream: MemoryObjectSendStream[JSONRPCMessage]) -> None:
        self._send = send_stream

    async def reply(self, request_id: RequestId, result: dict[str, Any]) -> None:
        await self._queue(result_response(request_id, result), f"reply to {request_id!r}")

    async def reply_with_error(self, request_id: RequestId, code: int, message: str) -> None:
        await self._queue(error_response(request_id, code, message), f"error reply to {request_id!r}")

    async def notify(self, method: str, params: dict[str, Any] | None = None) -> None:
        await self._queue(notification(method, params), f"notification {method}")

    async def _queue(self, message: JSONRPCMessage, description: str) -> None:
        try:
            await self._send.send(message)
        except (anyio.ClosedResourceError, anyio.BrokenResourceError):
            logger.error("Connection closed, dropping %s", description)
