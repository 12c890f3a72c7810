"""JSON-RPC 2.0 envelope models and error codes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

JSONRPC_VERSION = "2.0"

# Error codes
ERROR_INVALID_REQUEST = -32600
ERROR_METHOD_NOT_FOUND = -32601
ERROR_INTERNAL_ERROR = -32603
ERROR_SERVER = -32000


class JsonRpcRequest(BaseModel):
    """Inbound envelope.

    Lenient: every field accepts any JSON value, so a wrong ``jsonrpc`` still
    parses and the caller receives ``Invalid Request`` echoing its ``id``.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Any = None
    id: Any = None
    method: Any = None
    params: Any = None


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def rpc_result(request_id: Any, result: Any) -> dict[str, Any]:
    """Build a JSON-RPC 2.0 success envelope."""
    return {"jsonrpc": JSONRPC_VERSION, "result": result, "id": request_id}


def rpc_error(
    request_id: Any,
    code: int,
    message: str,
    data: Any = None,
) -> dict[str, Any]:
    """Build a JSON-RPC 2.0 error envelope."""
    error = JsonRpcError(code=code, message=message, data=data)
    return {"jsonrpc": JSONRPC_VERSION, "error": error.to_dict(), "id": request_id}
