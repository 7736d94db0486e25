"""Server - routes inbound JSON-RPC messages to the protocol handlers.

No I/O and no run loop: a transport parses messages, hands each one to
``Server.handle_message`` together with the Connection it arrived on, and the
server answers through that connection.

Usage:
    server = Server(Implementation(name="example", version="1.0.0"), registry)
    await run_stdio(server)
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from mcpgate.context import Connection, Notifier
from mcpgate.exceptions import InvalidParamsError, McpError
from mcpgate.registry import Registry
from mcpgate.responses import RATE_LIMIT_EXCEEDED, dump_result, prompt_error, tool_error
from mcpgate.session import SessionInfo
from mcpgate.types.base import SUPPORTED_PROTOCOL_VERSION
from mcpgate.types.common import Implementation, ListChangedCapability, ServerCapabilities
from mcpgate.types.initialize import InitializeRequestParams, InitializeResult
from mcpgate.types.json_rpc import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    JSONRPCMessage,
    JSONRPCNotification,
    JSONRPCRequest,
    Params,
)
from mcpgate.types.prompts import GetPromptRequestParams, GetPromptResult, ListPromptsRequestParams, ListPromptsResult
from mcpgate.types.tools import CallToolRequestParams, CallToolResult, ListToolsRequestParams, ListToolsResult

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound=BaseModel)

RequestHandler = Callable[[Notifier, JSONRPCRequest], Awaitable[BaseModel | dict[str, Any]]]
NotificationHandler = Callable[[JSONRPCNotification], Awaitable[None]]


def _parse_params(model: type[ParamsT], params: Params, *, optional: bool = False) -> ParamsT:
    """Validate request params against ``model``; anything that does not fit is invalid params."""
    if params is None and optional:
        return model()
    if isinstance(params, list):
        raise InvalidParamsError()
    try:
        return model.model_validate(params)
    except ValidationError as exc:
        logger.debug("Rejecting params for %s: %s", model.__name__, exc)
        raise InvalidParamsError() from exc


class Server:
    """Dispatcher for one MCP server: fixed routing over a capability registry.

    Handles ``initialize``, ``ping``, ``tools/list``, ``tools/call``,
    ``prompts/list`` and ``prompts/get``. Every other request method is answered
    with "Method not found". Notifications never get a reply.
    """

    def __init__(self, server_info: Implementation, registry: Registry) -> None:
        self.server_info = server_info
        self.registry = registry
        self.session: SessionInfo | None = None
        self._request_handlers: dict[str, RequestHandler] = {
            "initialize": self._handle_initialize,
            "ping": self._handle_ping,
            "tools/list": self._handle_list_tools,
            "tools/call": self._handle_call_tool,
            "prompts/list": self._handle_list_prompts,
            "prompts/get": self._handle_get_prompt,
        }
        self._notification_handlers: dict[str, NotificationHandler] = {
            "notifications/initialized": self._handle_initialized,
        }

    @property
    def name(self) -> str:
        return self.server_info.name

    @property
    def version(self) -> str:
        return self.server_info.version

    def get_capabilities(self) -> ServerCapabilities:
        """Tools are always advertised; prompts only when at least one is registered."""
        capabilities = ServerCapabilities(tools=ListChangedCapability(list_changed=False))
        if self.registry.has_prompts:
            capabilities.prompts = ListChangedCapability(list_changed=False)
        return capabilities

    async def handle_message(self, connection: Connection, message: JSONRPCMessage) -> None:
        """Dispatch a single inbound message, replying on ``connection`` if it is a request."""
        if isinstance(message, JSONRPCRequest):
            await self.handle_request(connection, message)
        elif isinstance(message, JSONRPCNotification):
            await self.handle_notification(message)
        else:
            # This server never sends requests, so a response from the client answers nothing.
            logger.debug("Ignoring unsolicited response with id %r", message.id)

    async def handle_request(self, connection: Connection, request: JSONRPCRequest) -> None:
        handler = self._request_handlers.get(request.method)
        if handler is None:
            logger.debug("Method not found: %s", request.method)
            await connection.reply_with_error(request.id, METHOD_NOT_FOUND, "Method not found")
            return

        logger.debug("Handling %s (id=%r)", request.method, request.id)
        try:
            result = await handler(Notifier(connection=connection, request_id=request.id), request)
        except McpError as err:
            await connection.reply_with_error(request.id, err.error.code, err.error.message)
            return
        except Exception:
            logger.exception("Handler error for %s", request.method)
            await connection.reply_with_error(request.id, INTERNAL_ERROR, "Internal error")
            return
        await connection.reply(request.id, dump_result(result))

    async def handle_notification(self, notification: JSONRPCNotification) -> None:
        handler = self._notification_handlers.get(notification.method)
        if handler is None:
            logger.debug("Dropping notification %s", notification.method)
            return
        try:
            await handler(notification)
        except Exception:
            logger.exception("Notification handler error for %s", notification.method)

    async def _handle_initialize(self, notifier: Notifier, request: JSONRPCRequest) -> InitializeResult:
        # The client's side of the handshake is recorded, never negotiated.
        try:
            params = _parse_params(InitializeRequestParams, request.params)
        except InvalidParamsError:
            self.session = SessionInfo(client_info=None, client_capabilities=None, protocol_version=None)
        else:
            self.session = SessionInfo(
                client_info=params.client_info,
                client_capabilities=params.capabilities,
                protocol_version=params.protocol_version,
            )
            logger.info(
                "Client %s %s connected (protocol %s)",
                params.client_info.name,
                params.client_info.version,
                params.protocol_version,
            )
        return InitializeResult(
            protocol_version=SUPPORTED_PROTOCOL_VERSION,
            capabilities=self.get_capabilities(),
            server_info=self.server_info,
        )

    async def _handle_initialized(self, notification: JSONRPCNotification) -> None:
        logger.debug("Client finished initialization")

    async def _handle_ping(self, notifier: Notifier, request: JSONRPCRequest) -> dict[str, Any]:
        return {}

    async def _handle_list_tools(self, notifier: Notifier, request: JSONRPCRequest) -> ListToolsResult:
        params = _parse_params(ListToolsRequestParams, request.params, optional=True)
        if params.cursor is not None:
            # Pagination is not supported, so no cursor is ever valid.
            raise InvalidParamsError()
        return ListToolsResult(tools=self.registry.tools)

    async def _handle_call_tool(self, notifier: Notifier, request: JSONRPCRequest) -> CallToolResult:
        params = _parse_params(CallToolRequestParams, request.params)

        definition = self.registry.get_tool(params.name)
        if definition is None:
            raise InvalidParamsError(f"Unknown tool: {params.name}")

        if not definition.rate_gate.allow():
            logger.debug("Rate limit exceeded for tool %s", params.name)
            return tool_error(RATE_LIMIT_EXCEEDED)

        arguments = params.arguments or {}
        for required in definition.tool.input_schema.required or []:
            if required not in arguments:
                raise InvalidParamsError()

        try:
            return await definition.execute(notifier, params)
        except Exception as exc:
            logger.info("Tool %s failed: %s", params.name, exc)
            return tool_error(str(exc))

    async def _handle_list_prompts(self, notifier: Notifier, request: JSONRPCRequest) -> ListPromptsResult:
        params = _parse_params(ListPromptsRequestParams, request.params, optional=True)
        if params.cursor is not None:
            raise InvalidParamsError()
        return ListPromptsResult(prompts=self.registry.prompts)

    async def _handle_get_prompt(self, notifier: Notifier, request: JSONRPCRequest) -> GetPromptResult:
        params = _parse_params(GetPromptRequestParams, request.params)

        definition = self.registry.get_prompt(params.name)
        if definition is None:
            raise InvalidParamsError(f"Unknown prompt: {params.name}")

        if not definition.rate_gate.allow():
            logger.debug("Rate limit exceeded for prompt %s", params.name)
            return prompt_error(RATE_LIMIT_EXCEEDED)

        arguments = params.arguments or {}
        for argument in definition.prompt.arguments or []:
            if argument.required and argument.name not in arguments:
                raise InvalidParamsError(f"Missing required argument: {argument.name}")

        try:
            return await definition.process(notifier, params)
        except Exception as exc:
            logger.info("Prompt %s failed: %s", params.name, exc)
            return prompt_error(str(exc))
