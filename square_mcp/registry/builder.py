"""Registry construction from the endpoint catalogue.

Two shapes are supported:

``full``
    One method per catalogued Square operation, with its description,
    write flag and request type.
``simple``
    One method per HTTP verb on ``/v2/<service>``; every verb except
    ``get`` counts as a write and no request types are published.  The
    request always travels as a JSON body, whatever the verb.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from square_mcp.config import Settings
from square_mcp.downstream.client import SquareClient
from square_mcp.downstream.handlers import RestHandler
from square_mcp.registry.catalog import SERVICES, Endpoint
from square_mcp.registry.models import MethodDescriptor, ServiceDescriptor, ServiceRegistry

logger = logging.getLogger(__name__)

SIMPLE_VERBS = ("get", "post", "put", "delete")


def build_full_registry(
    client: SquareClient,
    services: Mapping[str, Mapping[str, Endpoint]] = SERVICES,
) -> ServiceRegistry:
    """Build the catalogue-driven registry."""
    descriptors = []
    for service_name, endpoints in services.items():
        methods = {
            method_name: MethodDescriptor(
                description=endpoint.description,
                is_write=endpoint.is_write,
                request_type=endpoint.request_type,
                handler=RestHandler(
                    client=client,
                    http_method=endpoint.http_method,
                    path=endpoint.path,
                    path_params=tuple(endpoint.path_params),
                ),
            )
            for method_name, endpoint in endpoints.items()
        }
        descriptors.append(ServiceDescriptor(name=service_name, methods=methods))
    return ServiceRegistry(descriptors)


def build_simple_registry(
    client: SquareClient,
    service_names: list[str] | None = None,
) -> ServiceRegistry:
    """Build the degenerate verb-per-service registry."""
    descriptors = []
    for service_name in service_names or list(SERVICES):
        path = f"/v2/{service_name.lower()}"
        methods = {
            verb: MethodDescriptor(
                description=f"{verb.upper()} {path}",
                is_write=verb != "get",
                request_type=None,
                handler=RestHandler(
                    client=client,
                    http_method=verb.upper(),
                    path=path,
                    query_verbs=frozenset(),
                ),
            )
            for verb in SIMPLE_VERBS
        }
        descriptors.append(ServiceDescriptor(name=service_name, methods=methods))
    return ServiceRegistry(descriptors)


def build_registry(settings: Settings) -> ServiceRegistry:
    """Build the registry selected by ``settings.REGISTRY_MODE``."""
    client = SquareClient(
        base_url=settings.base_url,
        square_version=settings.SQUARE_VERSION,
        timeout=settings.REQUEST_TIMEOUT,
        user_agent=f"Square-MCP-Server/{settings.SERVER_VERSION}",
    )
    if settings.REGISTRY_MODE == "simple":
        registry = build_simple_registry(client)
    else:
        registry = build_full_registry(client)
    logger.info(
        "Built %s registry: %d services, %d methods against %s",
        settings.REGISTRY_MODE,
        len(registry),
        registry.method_count(),
        settings.base_url,
    )
    return registry
