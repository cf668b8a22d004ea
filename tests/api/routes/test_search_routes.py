"""Testes dos endpoints JSON de busca, estatísticas e download."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from conftest import make_payload


@pytest.fixture
def client(app_env) -> TestClient:
    return TestClient(create_app())


def test_search_returns_normalized_results(client: TestClient, stub_leakosint) -> None:
    calls = stub_leakosint({"List": make_payload({"Alpha": 2, "Beta": 1})})

    response = client.post("/api/search", json={"query": "user0@example.com", "limit": 10})

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["resultCount"] == 3
    assert [r["breachName"] for r in payload["results"]] == ["Alpha", "Alpha", "Beta"]
    assert payload["results"][0]["matchedField"] == "Email"
    assert calls[0]["limit"] == 10


def test_search_uses_default_limit(client: TestClient, stub_leakosint) -> None:
    calls = stub_leakosint({"List": {}})
    client.post("/api/search", json={"query": "john"})
    assert calls[0]["limit"] == 100


@pytest.mark.parametrize(
    "body",
    [{}, {"query": "   "}, {"query": "john", "limit": 0}, {"query": "john", "limit": "many"}],
)
def test_search_validation_errors(client: TestClient, body: dict) -> None:
    response = client.post("/api/search", json=body)
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_search_missing_query_message(client: TestClient) -> None:
    response = client.post("/api/search", json={})
    assert response.json()["message"] == "Query is required"


def test_search_upstream_failure_returns_500(client: TestClient, stub_leakosint) -> None:
    stub_leakosint({"Error code": "bad token"})

    response = client.post("/api/search", json={"query": "john"})

    assert response.status_code == 500
    payload = response.json()
    assert payload["error"] == "upstream_error"
    assert payload["message"] == "API Error: bad token"

    stored = client.get(f"/api/searches/{payload['searchId']}").json()
    assert stored["search"]["resultCount"] == 0
    assert stored["results"] == []


def test_search_upstream_http_error_returns_500(client: TestClient, stub_leakosint) -> None:
    stub_leakosint({"detail": "unavailable"}, status_code=503)

    response = client.post("/api/search", json={"query": "john"})

    assert response.status_code == 500
    payload = response.json()
    assert payload["error"] == "upstream_error"
    assert payload["searchId"]


def test_search_without_token_returns_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    from config.settings import get_leakosint_settings

    monkeypatch.setenv("LEAKOSINT_API_TOKEN", "")
    get_leakosint_settings.cache_clear()

    response = client.post("/api/search", json={"query": "john"})

    assert response.status_code == 500
    assert response.json()["message"] == "Search service not configured"


def test_stats_and_search_lookup(client: TestClient, stub_leakosint) -> None:
    stub_leakosint({"List": make_payload({"Alpha": 4})})
    search_id = client.post("/api/search", json={"query": "john", "platform": "web"}).json()["searchId"]

    assert client.get("/api/stats").json() == {"totalSearches": 1, "totalResults": 4}

    stored = client.get(f"/api/searches/{search_id}").json()
    assert stored["search"]["query"] == "john"
    assert stored["search"]["platform"] == "web"
    assert stored["search"]["resultCount"] == 4
    assert len(stored["results"]) == 4


def test_unknown_search_returns_404(client: TestClient) -> None:
    assert client.get("/api/searches/missing").status_code == 404


def test_download_requires_search_id(client: TestClient) -> None:
    response = client.get("/download")
    assert response.status_code == 400
    assert response.text == "Missing searchId parameter"


def test_download_unknown_search_returns_404(client: TestClient) -> None:
    response = client.get("/download", params={"searchId": "missing"})
    assert response.status_code == 404
    assert response.text == "No results found"


@pytest.mark.parametrize(
    ("fmt", "content_type", "extension"),
    [("txt", "text/plain", "txt"), ("json", "application/json", "json"), ("html", "text/html", "html"), ("xml", "text/plain", "txt")],
)
def test_download_formats(
    client: TestClient, stub_leakosint, fmt: str, content_type: str, extension: str
) -> None:
    stub_leakosint({"List": make_payload({"Alpha": 2})})
    search_id = client.post("/api/search", json={"query": "john"}).json()["searchId"]

    response = client.get("/download", params={"searchId": search_id, "format": fmt})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(content_type)
    assert response.headers["content-disposition"] == (
        f'attachment; filename="breach_results_{search_id}.{extension}"'
    )


def test_unknown_file_returns_404(client: TestClient) -> None:
    response = client.get("/files/missing")
    assert response.status_code == 404
    assert response.text == "Not Found"
