"""Protocol-level session state from the init handshake."""

from __future__ import annotations

from dataclasses import dataclass

from mcpgate.types.common import ClientCapabilities, Implementation


@dataclass(frozen=True)
class SessionInfo:
    """What the client said about itself in ``initialize``.

    Recorded for logging and inspection only; none of it is matched against
    what the server supports. Fields are None when the client omitted them or
    sent something that did not parse.
    """

    client_info: Implementation | None
    client_capabilities: ClientCapabilities | None
    protocol_version: str | None
