"""Testes do endpoint da ponte Revolt."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from conftest import make_payload

URL = "/webhook/revolt/messages"
AUTH = {"Authorization": "Bearer revolt-secret"}


@pytest.fixture
def client(app_env) -> TestClient:
    return TestClient(create_app())


def test_wrong_token_returns_401(client: TestClient) -> None:
    response = client.post(URL, json={"content": "!breach help"}, headers={"Authorization": "Bearer x"})
    assert response.status_code == 401
    assert response.text == "Unauthorized"


def test_invalid_json_returns_400(client: TestClient) -> None:
    response = client.post(URL, content=b"{", headers=AUTH)
    assert response.status_code == 400


def test_non_command_is_ignored(client: TestClient) -> None:
    response = client.post(URL, json={"content": "hello there"}, headers=AUTH)
    assert response.status_code == 200
    assert response.json() == {"content": None}


def test_test_command(client: TestClient) -> None:
    response = client.post(URL, json={"content": "!breach test"}, headers=AUTH)
    assert response.json() == {"content": "✅ Revolt bot communication is working!"}


def test_empty_subcommand_is_unknown(client: TestClient) -> None:
    response = client.post(URL, json={"content": "!breach"}, headers=AUTH)
    assert response.json()["content"].startswith("❌ Unknown command.")


def test_search_overflow_returns_file_link(client: TestClient, stub_leakosint) -> None:
    stub_leakosint({"List": make_payload({"Alpha": 3, "Beta": 2})})

    response = client.post(URL, json={"content": "!breach search user1@example.com"}, headers=AUTH)

    payload = response.json()
    assert "📊 Found 5 total results (showing first 3)" in payload["content"]
    assert payload["file_url"].startswith("https://breaches.example.com/files/")
    assert payload["file_name"].startswith("breach_search_user1_example_com_")

    download = client.get(payload["file_url"].replace("https://breaches.example.com", ""))
    assert download.status_code == 200
    assert download.text.count("Result #") == 5


def test_custom_prefix(app_env, monkeypatch: pytest.MonkeyPatch) -> None:
    from app.bootstrap import reset_dependencies

    monkeypatch.setenv("REVOLT_COMMAND_PREFIX", "!leak")
    reset_dependencies()
    client = TestClient(create_app())

    ignored = client.post(URL, json={"content": "!breach help"}, headers=AUTH)
    helped = client.post(URL, json={"content": "!leak help"}, headers=AUTH)

    assert ignored.json() == {"content": None}
    assert "`!leak search <query>`" in helped.json()["content"]


def test_null_content_is_ignored(client: TestClient) -> None:
    response = client.post(URL, json={"content": None, "type": "Message"}, headers=AUTH)
    assert response.status_code == 200
    assert response.json() == {"content": None}


def test_search_uses_configured_default_limit(
    app_env, monkeypatch: pytest.MonkeyPatch, stub_leakosint
) -> None:
    from app.bootstrap import reset_dependencies

    monkeypatch.setenv("LEAKOSINT_DEFAULT_LIMIT", "7")
    reset_dependencies()
    calls = stub_leakosint({"List": {}})
    client = TestClient(create_app())

    client.post(URL, json={"content": "!breach search john"}, headers=AUTH)

    assert calls[0]["limit"] == 7
