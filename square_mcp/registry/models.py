"""Registry data model: services, their method tables and descriptors.

The registry is built once at startup from declarative data and never
mutated afterwards.  It is keyed by the canonical (capitalised) service
name; callers' spellings are normalised by the dispatcher, not here.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

Handler = Callable[[str, dict[str, Any]], Awaitable[Any]]
"""``(credential, request) -> result`` coroutine performing one downstream call."""


@dataclass(frozen=True)
class MethodDescriptor:
    """Everything the gateway knows about one ``service.method``.

    Attributes:
        description: Human-readable summary exposed by ``get_service_info``.
        is_write: Whether the method mutates remote state.
        request_type: Key into the type table, used for introspection only.
        handler: Coroutine that performs the call.
    """

    description: str
    is_write: bool
    request_type: str | None
    handler: Handler = field(repr=False, compare=False)


@dataclass(frozen=True)
class ServiceDescriptor:
    """One service and its method table."""

    name: str
    methods: Mapping[str, MethodDescriptor]

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", MappingProxyType(dict(self.methods)))


class ServiceRegistry(Mapping[str, Mapping[str, MethodDescriptor]]):
    """Read-only mapping of canonical service name to method table."""

    def __init__(self, services: Iterable[ServiceDescriptor]) -> None:
        tables: dict[str, Mapping[str, MethodDescriptor]] = {}
        for service in services:
            if service.name in tables:
                raise ValueError(f"Service '{service.name}' is already registered")
            tables[service.name] = service.methods
        self._services = MappingProxyType(tables)

    def __getitem__(self, name: str) -> Mapping[str, MethodDescriptor]:
        return self._services[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._services)

    def __len__(self) -> int:
        return len(self._services)

    def service_names(self) -> list[str]:
        """Sorted, lower-cased service names as shown to callers."""
        return sorted(name.lower() for name in self._services)

    def method_count(self) -> int:
        return sum(len(methods) for methods in self._services.values())
