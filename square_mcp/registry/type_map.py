"""Request type information served by ``get_type_info``.

The table is derived from the endpoint catalogue: path parameters are
required strings, every other declared field is optional.  It is used for
introspection only; requests are never validated against it.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from square_mcp.registry.catalog import SERVICES, Endpoint

TypeMap = Mapping[str, dict[str, Any]]


def describe_endpoint(endpoint: Endpoint) -> dict[str, Any]:
    """Render the JSON description of an endpoint's request type."""
    properties: dict[str, Any] = {
        name: {"type": "string", "in": "path"} for name in endpoint.path_params
    }
    location = "query" if endpoint.http_method in ("GET", "DELETE") else "body"
    for name, json_type in endpoint.fields.items():
        properties[name] = {"type": json_type, "in": location}
    return {
        "name": endpoint.request_type,
        "httpMethod": endpoint.http_method,
        "path": endpoint.path,
        "properties": properties,
        "required": endpoint.path_params,
    }


def build_type_map(
    services: Mapping[str, Mapping[str, Endpoint]] = SERVICES,
) -> TypeMap:
    types: dict[str, dict[str, Any]] = {}
    for methods in services.values():
        for endpoint in methods.values():
            types[endpoint.request_type] = describe_endpoint(endpoint)
    return MappingProxyType(types)


TYPE_MAP: TypeMap = build_type_map()
