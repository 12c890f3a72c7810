"""Failure taxonomy for tool calls.

Every failure raised while serving ``tools/call`` derives from
:class:`GatewayError` and is reported to the caller as a JSON-RPC
application error (code ``-32000``) over HTTP 200.  Only defects outside
that boundary become ``-32603`` internal errors.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from square_mcp.mcp.models import ERROR_SERVER


def _listing(names: Iterable[str]) -> str:
    return json.dumps(list(names), indent=2)


class GatewayError(Exception):
    """Base class for failures surfaced as JSON-RPC application errors."""

    code: int = ERROR_SERVER

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownService(GatewayError):
    """The requested service is not in the registry."""

    def __init__(self, service: str, available: list[str]) -> None:
        self.service = service
        self.available = available
        super().__init__(
            f"Invalid service: {service}. Available services: {_listing(available)}"
        )


class UnknownMethod(GatewayError):
    """The service exists but has no method of that name."""

    def __init__(self, service: str, method: str, available: list[str]) -> None:
        self.service = service
        self.method = method
        self.available = available
        super().__init__(
            f"Invalid method {method} for service {service}. "
            f"Available methods: {_listing(available)}"
        )


class WriteDisallowed(GatewayError):
    """A mutating method was called while writes are disabled."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            "Write operations are not allowed in this environment. "
            f"Attempted operation: {operation}"
        )


class TypeInfoMissing(GatewayError):
    """The method's request type has no entry in the type table."""

    def __init__(self, request_type: str | None) -> None:
        self.request_type = request_type
        super().__init__(f"Type information not found for {request_type}")


class HandlerFailure(GatewayError):
    """The downstream handler raised; carries its message verbatim."""


class UnknownTool(GatewayError):
    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingArgument(GatewayError):
    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Missing required argument: {argument}")


class DownstreamError(Exception):
    """Raised by handlers when the Square API answers with a non-2xx status."""

    def __init__(self, status: int, reason: str, body: str) -> None:
        self.status = status
        self.reason = reason
        self.body = body
        super().__init__(f"Square API error: {status} {reason} - {body}")
