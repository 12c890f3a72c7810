"""MCP endpoint — FastAPI route for JSON-RPC requests."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from square_mcp.mcp.models import ERROR_INTERNAL_ERROR, rpc_error
from square_mcp.mcp.protocol import ProtocolAdapter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/mcp")
async def mcp_endpoint(request: Request) -> JSONResponse:
    """JSON-RPC 2.0 endpoint.

    The raw body is decoded here; envelope problems are reported as
    JSON-RPC errors, never as a FastAPI 422.
    """
    adapter: ProtocolAdapter = request.app.state.adapter
    raw = await request.body()

    try:
        body = json.loads(raw) if raw.strip() else {}
    except ValueError as exc:
        logger.warning("Undecodable MCP request body: %s", exc)
        return JSONResponse(
            status_code=500,
            content=rpc_error(None, ERROR_INTERNAL_ERROR, "Internal error", str(exc)),
        )

    status_code, payload = await adapter.handle(body)
    return JSONResponse(status_code=status_code, content=payload)
