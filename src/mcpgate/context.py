"""Connection protocol and the per-request Notifier handed to callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mcpgate.types.json_rpc import RequestId


@runtime_checkable
class Connection(Protocol):
    """Outgoing half of a client connection, as seen by the dispatcher.

    The transport provides the implementation. Every method queues one message
    for the connection's writer, so messages queued by one request go out in the
    order they were queued. Write failures are the transport's to log; they are
    never raised back into request processing.
    """

    async def reply(self, request_id: RequestId, result: dict[str, Any]) -> None:
        """Send a successful response to ``request_id``."""
        ...

    async def reply_with_error(self, request_id: RequestId, code: int, message: str) -> None:
        """Send a JSON-RPC error response to ``request_id``."""
        ...

    async def notify(self, method: str, params: dict[str, Any] | None = None) -> None:
        """Send a notification (a message without an id)."""
        ...


@dataclass(frozen=True)
class Notifier:
    """What tool and prompt callbacks receive for talking back to the client.

    Scoped to one request. Anything sent through it is written before that
    request's reply, since the reply is only queued once the callback returns.
    """

    connection: Connection
    request_id: RequestId

    async def notify(self, method: str, params: dict[str, Any] | None = None) -> None:
        """Send a notification to the client during request processing."""
        await self.connection.notify(method, params)
