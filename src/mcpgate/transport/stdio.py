"""Stdio Server Transport Module

Runs a Server over the process' stdin/stdout using newline-delimited JSON-RPC:
every line read is one message, every message written is one line.

Example:
    ```python
    async def run_server():
        server = build_server(Settings())
        await run_stdio(server)

    anyio.run(run_server)
    ```
"""

from __future__ import annotations

import logging
import sys
from io import TextIOWrapper
from typing import BinaryIO

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream
from pydantic import ValidationError

from mcpgate.server import Server
from mcpgate.transport.sink import StreamConnection
from mcpgate.types.json_rpc import JSONRPCMessage, JSONRPCMessageAdapter

logger = logging.getLogger(__name__)


class _NonClosingTextIOWrapper(TextIOWrapper):
    """Text wrapper that never closes the underlying binary stream.

    run_stdio should not close the process' real stdin/stdout handles when it
    returns.
    """

    def close(self) -> None:
        if self.closed:
            return

        # Preserve normal flush semantics for writable streams while keeping the
        # underlying stdio handle alive.
        if self.writable():
            self.flush()


def _wrap_process_stdio(binary_stream: BinaryIO) -> anyio.AsyncFile[str]:
    return anyio.wrap_file(_NonClosingTextIOWrapper(binary_stream, encoding="utf-8"))


async def _write_messages(
    stdout: anyio.AsyncFile[str],
    messages: MemoryObjectReceiveStream[JSONRPCMessage],
) -> None:
    """Sole writer for the connection: one JSON object and a newline per message."""
    async with messages:
        async for message in messages:
            data = message.model_dump_json(by_alias=True, exclude_none=True)
            try:
                await stdout.write(data + "\n")
                await stdout.flush()
            except (OSError, ValueError):
                # A closed or broken stdout drops the message; the writer keeps draining.
                logger.exception("Failed to write message to stdout")


async def run_stdio(
    server: Server,
    stdin: anyio.AsyncFile[str] | None = None,
    stdout: anyio.AsyncFile[str] | None = None,
) -> None:
    """Serve one client over stdio until stdin reaches EOF or sends an unparseable line.

    Each request is handled in its own task, so a slow tool does not hold up the
    requests behind it. Before returning, waits for in-flight requests to finish
    and for their replies to be written.
    """
    # Encoding of stdin/stdout as text streams on python is platform-dependent,
    # so the underlying binary streams are re-wrapped to ensure UTF-8.
    if not stdin:
        stdin = _wrap_process_stdio(sys.stdin.buffer)
    if not stdout:
        stdout = _wrap_process_stdio(sys.stdout.buffer)

    write_stream, write_stream_reader = anyio.create_memory_object_stream[JSONRPCMessage](0)

    logger.info("Serving %s %s over stdio", server.name, server.version)
    async with anyio.create_task_group() as tg:
        tg.start_soon(_write_messages, stdout, write_stream_reader)

        async with write_stream:
            connection = StreamConnection(write_stream)
            async with anyio.create_task_group() as requests:
                try:
                    async for raw_line in stdin:
                        line = raw_line.strip()
                        if not line:
                            continue
                        try:
                            message = JSONRPCMessageAdapter.validate_json(line)
                        except ValidationError as exc:
                            logger.error("Closing connection after invalid JSON-RPC message: %s", exc)
                            break
                        requests.start_soon(server.handle_message, connection, message)
                except UnicodeDecodeError as exc:
                    logger.error("Closing connection after input that is not valid UTF-8: %s", exc)
    logger.info("Stdio connection closed")
