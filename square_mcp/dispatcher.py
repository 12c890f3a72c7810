"""Service/method dispatch against the registry.

The dispatcher owns the caller-facing naming rule: a service name has
its first character upper-cased and is then looked up verbatim; method
names are never transformed.  Every failure is raised as a
:class:`~square_mcp.core.errors.GatewayError` subclass.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from square_mcp.core.errors import (
    HandlerFailure,
    TypeInfoMissing,
    UnknownMethod,
    UnknownService,
)
from square_mcp.core.policy import WritePolicy
from square_mcp.registry.models import MethodDescriptor, ServiceRegistry
from square_mcp.registry.type_map import TypeMap

logger = logging.getLogger(__name__)


def canonical_service_name(service: str) -> str:
    """``"catalog"`` → ``"Catalog"``; the rest of the name is kept as typed."""
    return service[:1].upper() + service[1:]


@dataclass(frozen=True)
class ToolResult:
    """Successful tool outcome: a single text content item."""

    text: str

    @classmethod
    def from_value(cls, value: Any) -> ToolResult:
        if isinstance(value, str):
            return cls(text=value)
        return cls(text=json.dumps(value, default=str))

    def to_dict(self) -> dict[str, Any]:
        return {"content": [{"type": "text", "text": self.text}]}


@dataclass
class Dispatcher:
    """Resolves ``(service, method)`` pairs and runs their handlers.

    Parameters
    ----------
    registry:
        Read-only service registry.
    credential:
        Accessor for the Square access token, read once per dispatch.
    writes_disabled:
        Accessor for the write-policy flag.
    type_map:
        Request type table consulted by :meth:`describe_method`.
    """

    registry: ServiceRegistry
    credential: Callable[[], str]
    writes_disabled: Callable[[], bool]
    type_map: TypeMap = field(default_factory=dict)
    policy: WritePolicy = field(init=False)

    def __post_init__(self) -> None:
        self.policy = WritePolicy(writes_disabled=self.writes_disabled)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_service(self, service: str) -> Mapping[str, MethodDescriptor]:
        methods = self.registry.get(canonical_service_name(service))
        if methods is None:
            raise UnknownService(service, self.registry.service_names())
        return methods

    def resolve(self, service: str, method: str) -> MethodDescriptor:
        methods = self.resolve_service(service)
        descriptor = methods.get(method)
        if descriptor is None:
            raise UnknownMethod(service, method, list(methods))
        return descriptor

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def dispatch(
        self,
        service: str,
        method: str,
        request: dict[str, Any] | None = None,
        credential: str | None = None,
    ) -> ToolResult:
        """Run ``service.method`` with ``request`` against the Square API.

        The request is passed to the handler unvalidated; ``get_type_info``
        is the only place request types are consulted.
        """
        descriptor = self.resolve(service, method)
        operation = f"{service}.{method}"
        self.policy.check(operation=operation, is_write=descriptor.is_write).enforce()

        token = self.credential() if credential is None else credential
        logger.info("Dispatching %s (write=%s)", operation, descriptor.is_write)
        try:
            value = await descriptor.handler(token, request or {})
        except Exception as exc:
            logger.warning("Handler for %s failed: %s", operation, exc)
            raise HandlerFailure(str(exc)) from exc
        return ToolResult.from_value(value)

    def describe_method(self, service: str, method: str) -> ToolResult:
        """Return the request type information for ``service.method``."""
        descriptor = self.resolve(service, method)
        type_info = (
            self.type_map.get(descriptor.request_type)
            if descriptor.request_type is not None
            else None
        )
        if type_info is None:
            raise TypeInfoMissing(descriptor.request_type)
        return ToolResult(text=json.dumps(type_info, indent=2))

    def describe_service(self, service: str) -> ToolResult:
        """Return ``{method: {"description": ...}}`` for every method of ``service``."""
        methods = self.resolve_service(service)
        summary = {
            name: {"description": descriptor.description}
            for name, descriptor in methods.items()
        }
        return ToolResult(text=json.dumps(summary, indent=2))
