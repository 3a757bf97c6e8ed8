from __future__ import annotations

import httpx
import pytest

from motor_metrics.adapters.http_model_lookup_gateway import HttpModelLookupGateway
from motor_metrics.ports.model_lookup_gateway import ModelLookupError


def _gateway(handler) -> HttpModelLookupGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpModelLookupGateway(base_url="http://lookup.test", client=client)


@pytest.mark.asyncio
async def test_models_for_make_returns_sorted_unique_models() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"models": ["Ranger", "F-150", "Bronco", "F-150", ""]})

    models = await _gateway(handler).models_for_make(" Ford ")

    assert models == ["Bronco", "F-150", "Ranger"]
    assert seen[0].url.path == "/api/models"
    assert seen[0].url.params["make"] == "Ford"


@pytest.mark.asyncio
async def test_models_for_empty_make_skips_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    assert await _gateway(handler).models_for_make("  ") == []


@pytest.mark.asyncio
async def test_models_for_make_status_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    with pytest.raises(ModelLookupError) as exc_info:
        await _gateway(handler).models_for_make("Ford")

    assert "503" in exc_info.value.message
    assert exc_info.value.context["make"] == "Ford"


@pytest.mark.asyncio
async def test_models_for_make_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    with pytest.raises(ModelLookupError):
        await _gateway(handler).models_for_make("Ford")


@pytest.mark.asyncio
async def test_models_for_make_invalid_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"Results": []})

    with pytest.raises(ModelLookupError):
        await _gateway(handler).models_for_make("Ford")
