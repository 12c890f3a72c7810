"""Tool definitions published by ``tools/list``.

Three logical tools front the whole Square API; the concrete operation is
chosen by the ``service`` and ``method`` arguments.
"""

from __future__ import annotations

from typing import Any

MAKE_API_REQUEST = "make_api_request"
GET_TYPE_INFO = "get_type_info"
GET_SERVICE_INFO = "get_service_info"

# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def _tool(
    name: str,
    description: str,
    parameters: dict[str, Any],
    required: list[str] | None = None,
) -> dict[str, Any]:
    """Build an MCP tool definition."""
    return {
        "name": name,
        "description": description,
        "inputSchema": {
            "type": "object",
            "properties": parameters,
            "required": required or [],
        },
    }


_SERVICE = {
    "type": "string",
    "description": 'The Square API service category (e.g., "catalog", "payments")',
}
_METHOD = {
    "type": "string",
    "description": 'The API method to call (e.g., "list", "create")',
}


def build_tools(service_names: list[str]) -> list[dict[str, Any]]:
    """Render the tool catalogue for the given (lower-cased) service names."""
    return [
        _tool(
            name=MAKE_API_REQUEST,
            description=(
                "Unified tool for all Square API operations. "
                f"Available services: {', '.join(service_names)}."
            ),
            parameters={
                "service": _SERVICE,
                "method": _METHOD,
                "request": {
                    "type": "object",
                    "description": "The request object for the API call.",
                },
            },
            required=["service", "method"],
        ),
        _tool(
            name=GET_TYPE_INFO,
            description="Get type information for a Square API method.",
            parameters={"service": _SERVICE, "method": _METHOD},
            required=["service", "method"],
        ),
        _tool(
            name=GET_SERVICE_INFO,
            description="Get information about a Square API service.",
            parameters={"service": _SERVICE},
            required=["service"],
        ),
    ]
