"""Testes do cliente HTTP LeakOSINT com httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.leakosint import LeakOsintClient, create_leakosint_client
from config.settings import LeakOsintSettings
from utils.errors import ConfigurationError, RemoteError, TransportError, ValidationError

SETTINGS = LeakOsintSettings(api_token="secret-token", api_url="https://leak.test/")


def _client(handler) -> LeakOsintClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return LeakOsintClient(SETTINGS, http_client=http_client)


def test_missing_token_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="LeakOSINT API token not configured"):
        LeakOsintClient(LeakOsintSettings(api_token=""))


def test_factory_uses_given_settings() -> None:
    assert isinstance(create_leakosint_client(SETTINGS), LeakOsintClient)


@pytest.mark.asyncio
async def test_query_posts_expected_payload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"List": {"Src": {"InfoLeak": "d", "Data": []}}})

    sources = await _client(handler).query("john@example.com", 25)

    assert sources == {"Src": {"InfoLeak": "d", "Data": []}}
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "https://leak.test/"
    assert json.loads(seen[0].content) == {
        "token": "secret-token",
        "request": "john@example.com",
        "limit": 25,
        "lang": "en",
        "type": "json",
    }


@pytest.mark.asyncio
async def test_missing_list_returns_empty_mapping() -> None:
    client = _client(lambda request: httpx.Response(200, json={"NumOfResults": 0}))
    assert await client.query("q") == {}


@pytest.mark.asyncio
async def test_error_code_raises_remote_error() -> None:
    client = _client(lambda request: httpx.Response(200, json={"Error code": "bad token"}))

    with pytest.raises(RemoteError) as exc_info:
        await client.query("q")

    assert str(exc_info.value) == "API Error: bad token"
    assert exc_info.value.error_code == "bad token"


@pytest.mark.asyncio
async def test_non_success_status_raises_transport_error() -> None:
    client = _client(lambda request: httpx.Response(503, text="down"))

    with pytest.raises(TransportError) as exc_info:
        await client.query("q")

    assert str(exc_info.value) == "API request failed: 503"
    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_timeout_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(TransportError, match="timed out"):
        await _client(handler).query("q")


@pytest.mark.asyncio
async def test_connection_error_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(TransportError, match="connection error"):
        await _client(handler).query("q")


@pytest.mark.asyncio
async def test_invalid_json_raises_transport_error() -> None:
    client = _client(lambda request: httpx.Response(200, content=b"<html>"))
    with pytest.raises(TransportError, match="invalid JSON"):
        await client.query("q")


@pytest.mark.asyncio
async def test_non_object_payload_raises_transport_error() -> None:
    client = _client(lambda request: httpx.Response(200, json=[1, 2]))
    with pytest.raises(TransportError, match="unexpected payload"):
        await client.query("q")


@pytest.mark.asyncio
@pytest.mark.parametrize(("query", "limit"), [("", 10), ("   ", 10), ("q", 0), ("q", -5)])
async def test_invalid_input_never_calls_api(query: str, limit: int) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(ValidationError):
        await _client(handler).query(query, limit)
    assert calls == []
