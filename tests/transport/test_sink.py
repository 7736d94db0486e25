import logging

import anyio
import pytest

from mcpgate.transport.sink import StreamConnection
from mcpgate.types import JSONRPCErrorResponse, JSONRPCMessage, JSONRPCNotification, JSONRPCResultResponse

pytestmark = pytest.mark.anyio


async def test_messages_are_queued_in_order():
    send, receive = anyio.create_memory_object_stream[JSONRPCMessage](10)
    connection = StreamConnection(send)

    await connection.notify("test/notification", {"message": "Processing text"})
    await connection.reply(1, {"ok": True})
    await connection.reply_with_error(2, -32602, "Invalid params")
    send.close()

    async with receive:
        messages = [message async for message in receive]

    assert messages == [
        JSONRPCNotification(method="test/notification", params={"message": "Processing text"}),
        JSONRPCResultResponse(id=1, result={"ok": True}),
        JSONRPCErrorResponse.model_validate({"id": 2, "error": {"code": -32602, "message": "Invalid params"}}),
    ]


async def test_write_after_close_is_logged_not_raised(caplog: pytest.LogCaptureFixture):
    send, receive = anyio.create_memory_object_stream[JSONRPCMessage](10)
    connection = StreamConnection(send)
    receive.close()

    with caplog.at_level(logging.ERROR, logger="mcpgate.transport.sink"):
        await connection.reply(1, {})
        await connection.notify("test/notification")

    assert "dropping reply to 1" in caplog.text
    assert "dropping notification test/notification" in caplog.text
