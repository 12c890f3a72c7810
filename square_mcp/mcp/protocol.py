"""MCP protocol adapter — the JSON-RPC 2.0 request state machine.

Maps one decoded request body onto an ``(http_status, envelope)`` pair:

- malformed envelope (``jsonrpc`` not ``"2.0"``) → 400, ``-32600``
- unsupported RPC method → 400, ``-32601``
- ``tools/call`` failures → 200, ``-32000`` with the failure message
- anything unexpected → 500, ``-32603`` with the exception text as ``data``

The HTTP status therefore tells a caller whether its request was malformed
or whether the tool it asked for failed.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from square_mcp.core.errors import GatewayError, MissingArgument, UnknownTool
from square_mcp.dispatcher import Dispatcher, ToolResult
from square_mcp.mcp.models import (
    ERROR_INTERNAL_ERROR,
    ERROR_INVALID_REQUEST,
    ERROR_METHOD_NOT_FOUND,
    ERROR_SERVER,
    JSONRPC_VERSION,
    JsonRpcRequest,
    rpc_error,
    rpc_result,
)
from square_mcp.mcp.tools import (
    GET_SERVICE_INFO,
    GET_TYPE_INFO,
    MAKE_API_REQUEST,
    build_tools,
)

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"

Reply = tuple[int, dict[str, Any]]


def _require(arguments: dict[str, Any], name: str) -> Any:
    value = arguments.get(name)
    if value is None:
        raise MissingArgument(name)
    return value


class ProtocolAdapter:
    """Routes JSON-RPC envelopes to the dispatcher.

    The ``initialize`` and ``tools/list`` payloads are rendered once here,
    so serving them touches neither the registry nor the credential.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        *,
        server_name: str,
        server_version: str,
    ) -> None:
        self.dispatcher = dispatcher
        self._server_info = {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": server_name, "version": server_version},
        }
        self._tool_list = {"tools": build_tools(dispatcher.registry.service_names())}

        self._methods: dict[str, Callable[[JsonRpcRequest], Awaitable[Reply]]] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
        }
        self._tools: dict[str, Callable[[dict[str, Any]], Awaitable[ToolResult]]] = {
            MAKE_API_REQUEST: self._make_api_request,
            GET_TYPE_INFO: self._get_type_info,
            GET_SERVICE_INFO: self._get_service_info,
        }

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    async def handle(self, body: Any) -> Reply:
        """Serve one decoded request body."""
        request_id = body.get("id") if isinstance(body, dict) else None
        try:
            return await self._route(body)
        except Exception as exc:
            logger.exception("Internal error serving MCP request id=%s", request_id)
            return 500, rpc_error(request_id, ERROR_INTERNAL_ERROR, "Internal error", str(exc))

    async def _route(self, body: Any) -> Reply:
        if not isinstance(body, dict):
            return 400, rpc_error(None, ERROR_INVALID_REQUEST, "Invalid Request")

        envelope = JsonRpcRequest.model_validate(body)

        if envelope.jsonrpc != JSONRPC_VERSION:
            return 400, rpc_error(envelope.id, ERROR_INVALID_REQUEST, "Invalid Request")

        handler = self._methods.get(envelope.method) if isinstance(envelope.method, str) else None
        if handler is None:
            logger.info("Unsupported RPC method %r", envelope.method)
            return 400, rpc_error(envelope.id, ERROR_METHOD_NOT_FOUND, "Method not found")

        return await handler(envelope)

    # ------------------------------------------------------------------
    # RPC methods
    # ------------------------------------------------------------------

    async def _initialize(self, envelope: JsonRpcRequest) -> Reply:
        return 200, rpc_result(envelope.id, self._server_info)

    async def _tools_list(self, envelope: JsonRpcRequest) -> Reply:
        return 200, rpc_result(envelope.id, self._tool_list)

    async def _tools_call(self, envelope: JsonRpcRequest) -> Reply:
        params = envelope.params
        if not isinstance(params, dict):
            raise ValueError("tools/call requires an object of params")

        name = params.get("name")
        arguments = params.get("arguments") or {}
        try:
            result = await self.call_tool(name, arguments)
        except GatewayError as exc:
            logger.info("Tool %s failed: %s", name, exc.message)
            return 200, rpc_error(envelope.id, exc.code, exc.message)
        except Exception as exc:
            logger.exception("Unexpected error in tool %s", name)
            return 200, rpc_error(envelope.id, ERROR_SERVER, str(exc))
        return 200, rpc_result(envelope.id, result.to_dict())

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    async def call_tool(self, name: Any, arguments: Any) -> ToolResult:
        """Run one tool; raises :class:`GatewayError` on failure."""
        tool = self._tools.get(name) if isinstance(name, str) else None
        if tool is None:
            raise UnknownTool(name)
        if not isinstance(arguments, dict):
            raise GatewayError(f"Arguments for {name} must be an object")
        return await tool(arguments)

    async def _make_api_request(self, arguments: dict[str, Any]) -> ToolResult:
        return await self.dispatcher.dispatch(
            _require(arguments, "service"),
            _require(arguments, "method"),
            arguments.get("request"),
        )

    async def _get_type_info(self, arguments: dict[str, Any]) -> ToolResult:
        return self.dispatcher.describe_method(
            _require(arguments, "service"),
            _require(arguments, "method"),
        )

    async def _get_service_info(self, arguments: dict[str, Any]) -> ToolResult:
        return self.dispatcher.describe_service(_require(arguments, "service"))
