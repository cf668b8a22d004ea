"""Testes do endpoint de Interactions do Discord."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap import reset_dependencies
from conftest import make_payload

URL = "/webhook/discord/interactions"
TIMESTAMP = "1700000000"


@pytest.fixture
def client(app_env, monkeypatch: pytest.MonkeyPatch, public_key_hex: str) -> TestClient:
    monkeypatch.setenv("DISCORD_PUBLIC_KEY", public_key_hex)
    reset_dependencies()
    return TestClient(create_app())


def _post(client: TestClient, signing_key, payload: dict, *, timestamp: str = TIMESTAMP):
    body = json.dumps(payload).encode()
    headers = {
        "x-signature-ed25519": signing_key.sign(timestamp.encode() + body).hex(),
        "x-signature-timestamp": timestamp,
        "content-type": "application/json",
    }
    return client.post(URL, content=body, headers=headers)


def test_ping_returns_pong(client: TestClient, signing_key) -> None:
    response = _post(client, signing_key, {"type": 1})
    assert response.status_code == 200
    assert response.json() == {"type": 1}


def test_invalid_signature_returns_401(client: TestClient, signing_key) -> None:
    body = b'{"type": 1}'
    headers = {
        "x-signature-ed25519": signing_key.sign(TIMESTAMP.encode() + b"other").hex(),
        "x-signature-timestamp": TIMESTAMP,
    }
    response = client.post(URL, content=body, headers=headers)
    assert response.status_code == 401
    assert response.text == "Unauthorized"


def test_missing_headers_return_401(client: TestClient) -> None:
    response = client.post(URL, content=b'{"type": 1}')
    assert response.status_code == 401


def test_missing_public_key_rejects_everything(app_env, signing_key) -> None:
    reset_dependencies()
    response = _post(TestClient(create_app()), signing_key, {"type": 1})
    assert response.status_code == 401


def test_signed_garbage_returns_400(client: TestClient, signing_key) -> None:
    body = b"not json"
    headers = {
        "x-signature-ed25519": signing_key.sign(TIMESTAMP.encode() + body).hex(),
        "x-signature-timestamp": TIMESTAMP,
    }
    response = client.post(URL, content=body, headers=headers)
    assert response.status_code == 400


def test_help_command_returns_ephemeral_message(client: TestClient, signing_key) -> None:
    response = _post(client, signing_key, {"type": 2, "data": {"name": "help"}})

    payload = response.json()
    assert payload["type"] == 4
    assert payload["data"]["flags"] == 64
    assert "`/search <query>`" in payload["data"]["content"]


def test_search_command_runs_lookup(client: TestClient, signing_key, stub_leakosint) -> None:
    calls = stub_leakosint({"List": make_payload({"Alpha": 2})})

    response = _post(
        client,
        signing_key,
        {
            "type": 2,
            "data": {
                "name": "search",
                "options": [{"name": "query", "value": "user1@example.com"}, {"name": "limit", "value": 5}],
            },
        },
    )

    content = response.json()["data"]["content"]
    assert '**Search Results for "user1@example.com"**' in content
    assert "📊 Found 2 total results" in content
    assert calls[0]["limit"] == 5
    assert calls[0]["request"] == "user1@example.com"


def test_search_without_token_reports_configuration(
    client: TestClient, signing_key, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LEAKOSINT_API_TOKEN", "")
    from config.settings import get_leakosint_settings

    get_leakosint_settings.cache_clear()
    response = _post(
        client,
        signing_key,
        {"type": 2, "data": {"name": "search", "options": [{"name": "query", "value": "john"}]}},
    )
    assert response.json()["data"]["content"] == (
        "❌ API token not configured. Please contact administrator."
    )
