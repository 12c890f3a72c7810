"""Shared test fixtures for the Square MCP gateway."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator, Callable
from typing import Any
from unittest.mock import AsyncMock

# Pin the environment before any imports that read settings
os.environ["ACCESS_TOKEN"] = "test-token"
os.environ.pop("SANDBOX", None)
os.environ.pop("PRODUCTION", None)
os.environ.pop("DISALLOW_WRITES", None)

import pytest
from httpx import ASGITransport, AsyncClient

from square_mcp.config import Settings
from square_mcp.core.errors import DownstreamError
from square_mcp.dispatcher import Dispatcher
from square_mcp.main import create_app
from square_mcp.registry.models import MethodDescriptor, ServiceDescriptor, ServiceRegistry

CATALOG_LIST_TEXT = '{"objects": [{"id": "ITEM_1", "type": "ITEM"}]}'

TEST_TYPE_MAP: dict[str, dict[str, Any]] = {
    "ListCatalogRequest": {
        "name": "ListCatalogRequest",
        "properties": {"cursor": {"type": "string"}, "types": {"type": "string"}},
        "required": [],
    },
}


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from any local ``.env`` file."""
    values: dict[str, Any] = {"ACCESS_TOKEN": "test-token"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def handlers() -> dict[str, AsyncMock]:
    """One mock per registered ``service.method``, keyed by that label."""
    return {
        "Catalog.list": AsyncMock(return_value=CATALOG_LIST_TEXT),
        "Catalog.create": AsyncMock(return_value='{"catalog_object": {"id": "NEW"}}'),
        "Customers.get": AsyncMock(return_value={"customer": {"id": "C1"}}),
        "Customers.delete": AsyncMock(
            side_effect=DownstreamError(404, "Not Found", '{"errors": []}')
        ),
    }


@pytest.fixture
def registry(handlers: dict[str, AsyncMock]) -> ServiceRegistry:
    """Two-service registry backed by the mock handlers."""
    return ServiceRegistry(
        [
            ServiceDescriptor(
                name="Catalog",
                methods={
                    "list": MethodDescriptor(
                        description="Returns a list of all catalog objects.",
                        is_write=False,
                        request_type="ListCatalogRequest",
                        handler=handlers["Catalog.list"],
                    ),
                    "create": MethodDescriptor(
                        description="Creates a catalog object.",
                        is_write=True,
                        request_type="UpsertCatalogObjectRequest",
                        handler=handlers["Catalog.create"],
                    ),
                },
            ),
            ServiceDescriptor(
                name="Customers",
                methods={
                    "get": MethodDescriptor(
                        description="Returns details for a single customer.",
                        is_write=False,
                        request_type=None,
                        handler=handlers["Customers.get"],
                    ),
                    "delete": MethodDescriptor(
                        description="Deletes a customer profile.",
                        is_write=True,
                        request_type="DeleteCustomerRequest",
                        handler=handlers["Customers.delete"],
                    ),
                },
            ),
        ]
    )


@pytest.fixture
def make_dispatcher(registry: ServiceRegistry) -> Callable[..., Dispatcher]:
    def _make(*, writes_disabled: bool = False, token: str = "test-token") -> Dispatcher:
        return Dispatcher(
            registry=registry,
            credential=lambda: token,
            writes_disabled=lambda: writes_disabled,
            type_map=TEST_TYPE_MAP,
        )

    return _make


@pytest.fixture
def dispatcher(make_dispatcher: Callable[..., Dispatcher]) -> Dispatcher:
    return make_dispatcher()


@pytest.fixture
def make_client(registry: ServiceRegistry):
    """Factory yielding an async HTTP client bound to a freshly built app."""

    def _make(**overrides: Any) -> AsyncClient:
        app = create_app(
            settings=make_settings(**overrides),
            registry=registry,
            type_map=TEST_TYPE_MAP,
        )
        transport = ASGITransport(app=app)  # type: ignore[arg-type]
        return AsyncClient(transport=transport, base_url="http://test")

    return _make


@pytest.fixture
async def client(make_client) -> AsyncIterator[AsyncClient]:
    """Yield an async HTTP test client bound to the FastAPI app."""
    async with make_client() as ac:
        yield ac


@pytest.fixture
async def readonly_client(make_client) -> AsyncIterator[AsyncClient]:
    """Client for an app started with ``DISALLOW_WRITES=true``."""
    async with make_client(DISALLOW_WRITES=True) as ac:
        yield ac


def rpc(method: str, params: Any = None, request_id: Any = 1) -> dict[str, Any]:
    body: dict[str, Any] = {"jsonrpc": "2.0", "method": method, "id": request_id}
    if params is not None:
        body["params"] = params
    return body


def tool_call(name: str, arguments: Any = None, request_id: Any = 1) -> dict[str, Any]:
    params: dict[str, Any] = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    return rpc("tools/call", params, request_id)
