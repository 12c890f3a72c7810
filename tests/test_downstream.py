"""Tests for the Square REST client and the generic endpoint handler."""

from __future__ import annotations

import json

import httpx
import pytest

from square_mcp.core.errors import DownstreamError
from square_mcp.downstream.client import SquareClient
from square_mcp.downstream.handlers import RestHandler
from square_mcp.registry.builder import build_simple_registry


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status: int = 200, text: str = '{"ok": true}') -> None:
        self.status = status
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, text=self.text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(recorder: Recorder, **kwargs) -> SquareClient:
    return SquareClient(transport=httpx.MockTransport(recorder), **kwargs)


# ---------------------------------------------------------------------------
# SquareClient.invoke
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_invoke_sends_auth_and_version_headers():
    recorder = Recorder()
    client = _client(recorder, square_version="2024-01-18")
    status, text = await client.invoke("/v2/locations", "GET", "sq-token")

    assert (status, text) == (200, '{"ok": true}')
    request = recorder.last
    assert str(request.url) == "https://connect.squareup.com/v2/locations"
    assert request.headers["Authorization"] == "Bearer sq-token"
    assert request.headers["Square-Version"] == "2024-01-18"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"] == "Square-MCP-Server/1.0.0"


@pytest.mark.asyncio
async def test_invoke_posts_json_body():
    recorder = Recorder()
    client = _client(recorder, base_url="https://connect.squareupsandbox.com")
    await client.invoke("/v2/customers", "POST", "t", body={"given_name": "Ada"})

    request = recorder.last
    assert request.method == "POST"
    assert request.url.host == "connect.squareupsandbox.com"
    assert json.loads(request.content) == {"given_name": "Ada"}


@pytest.mark.asyncio
async def test_invoke_omits_empty_body():
    recorder = Recorder()
    await _client(recorder).invoke("/v2/payments/P1/cancel", "POST", "t", body={})
    assert recorder.last.content == b""


@pytest.mark.asyncio
async def test_invoke_flattens_query_params():
    recorder = Recorder()
    await _client(recorder).invoke(
        "/v2/catalog/list",
        "GET",
        "t",
        params={"types": ["ITEM", "CATEGORY"], "include_deleted": True, "cursor": None, "limit": 5},
    )
    params = recorder.last.url.params
    assert params["types"] == "ITEM,CATEGORY"
    assert params["include_deleted"] == "true"
    assert params["limit"] == "5"
    assert "cursor" not in params


@pytest.mark.asyncio
async def test_invoke_returns_error_status_without_raising():
    recorder = Recorder(status=401, text='{"errors": [{"code": "UNAUTHORIZED"}]}')
    status, text = await _client(recorder).invoke("/v2/locations", "GET", "bad")
    assert status == 401
    assert "UNAUTHORIZED" in text


# ---------------------------------------------------------------------------
# RestHandler
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_handler_fills_path_and_sends_rest_as_body():
    recorder = Recorder(text='{"payment": {}}')
    handler = RestHandler(
        client=_client(recorder),
        http_method="POST",
        path="/v2/payments/{payment_id}/complete",
        path_params=("payment_id",),
    )
    text = await handler("tok", {"payment_id": "P 1", "version_token": "v1"})

    assert text == '{"payment": {}}'
    assert recorder.last.url.raw_path == b"/v2/payments/P%201/complete"
    assert json.loads(recorder.last.content) == {"version_token": "v1"}


@pytest.mark.asyncio
async def test_handler_does_not_mutate_request():
    recorder = Recorder()
    handler = RestHandler(
        client=_client(recorder),
        http_method="GET",
        path="/v2/customers/{customer_id}",
        path_params=("customer_id",),
    )
    request = {"customer_id": "C1"}
    await handler("tok", request)
    assert request == {"customer_id": "C1"}


@pytest.mark.asyncio
async def test_handler_sends_query_for_get():
    recorder = Recorder()
    handler = RestHandler(client=_client(recorder), http_method="GET", path="/v2/payments")
    await handler("tok", {"location_id": "L1"})
    assert recorder.last.url.params["location_id"] == "L1"
    assert recorder.last.content == b""


@pytest.mark.asyncio
async def test_handler_missing_path_param():
    recorder = Recorder()
    handler = RestHandler(
        client=_client(recorder),
        http_method="GET",
        path="/v2/orders/{order_id}",
        path_params=("order_id",),
    )
    with pytest.raises(ValueError, match="Missing path parameter 'order_id'"):
        await handler("tok", {})
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_handler_raises_on_non_2xx():
    recorder = Recorder(status=404, text='{"errors": [{"code": "NOT_FOUND"}]}')
    handler = RestHandler(client=_client(recorder), http_method="GET", path="/v2/locations")
    with pytest.raises(DownstreamError) as excinfo:
        await handler("tok", {})
    error = excinfo.value
    assert (error.status, error.reason) == (404, "Not Found")
    assert str(error) == 'Square API error: 404 Not Found - {"errors": [{"code": "NOT_FOUND"}]}'


@pytest.mark.asyncio
async def test_handler_without_query_verbs_sends_get_body():
    recorder = Recorder()
    handler = RestHandler(
        _client(recorder), "GET", "/v2/catalog", query_verbs=frozenset()
    )
    await handler("t", {"types": "ITEM"})

    request = recorder.last
    assert request.method == "GET"
    assert request.url.query == b""
    assert json.loads(request.content) == {"types": "ITEM"}


@pytest.mark.asyncio
async def test_simple_registry_sends_request_as_body():
    recorder = Recorder()
    registry = build_simple_registry(_client(recorder), ["Customers"])
    await registry["Customers"]["get"].handler("t", {"limit": 5})

    request = recorder.last
    assert str(request.url) == "https://connect.squareup.com/v2/customers"
    assert json.loads(request.content) == {"limit": 5}
