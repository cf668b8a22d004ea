"""Configuração do pytest para o projeto Majic Breaches."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import httpx  # noqa: E402
from cryptography.hazmat.primitives import serialization  # noqa: E402
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey  # noqa: E402

from app.domain.breach import NormalizedResult  # noqa: E402


def make_result(index: int = 1, **overrides: Any) -> NormalizedResult:
    """Cria NormalizedResult de teste com valores previsíveis."""
    data: dict[str, Any] = {
        "search_id": "search-1",
        "source_name": f"Source {index}",
        "source_description": f"Leak number {index}",
        "matched_field": "email",
        "data_type_names": ("email", "password", "username", "ip"),
        "content": f"email: user{index}@example.com\npassword: hunter{index}",
    }
    data.update(overrides)
    return NormalizedResult(**data)


def make_payload(records_per_source: dict[str, int]) -> dict[str, Any]:
    """Monta o campo "List" com N registros por fonte."""
    payload: dict[str, Any] = {}
    for source, count in records_per_source.items():
        payload[source] = {
            "InfoLeak": f"{source} description",
            "Data": [
                {"Email": f"user{i}@example.com", "Password": f"pw{i}"} for i in range(count)
            ],
        }
    return payload


@pytest.fixture
def signing_key() -> Ed25519PrivateKey:
    return Ed25519PrivateKey.generate()


@pytest.fixture
def public_key_hex(signing_key: Ed25519PrivateKey) -> str:
    raw = signing_key.public_key().public_bytes(
        serialization.Encoding.Raw,
        serialization.PublicFormat.Raw,
    )
    return raw.hex()


@pytest.fixture
def app_env(monkeypatch: pytest.MonkeyPatch):
    """Ambiente mínimo para rotas: stores em memória e token configurado."""
    from app.bootstrap import reset_dependencies

    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("BREACH_STORE_BACKEND", "memory")
    monkeypatch.setenv("LEAKOSINT_API_TOKEN", "test-token")
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://breaches.example.com")
    monkeypatch.setenv("REVOLT_WEBHOOK_TOKEN", "revolt-secret")
    monkeypatch.delenv("DISCORD_PUBLIC_KEY", raising=False)
    monkeypatch.delenv("REVOLT_COMMAND_PREFIX", raising=False)
    monkeypatch.delenv("LEAKOSINT_DEFAULT_LIMIT", raising=False)
    reset_dependencies()
    yield
    reset_dependencies()


@pytest.fixture
def stub_leakosint(monkeypatch: pytest.MonkeyPatch):
    """Substitui a API externa por httpx.MockTransport.

    Uso:
        calls = stub_leakosint({"List": {...}})
    """
    from api.connectors.leakosint import LeakOsintClient
    from config.settings import get_leakosint_settings

    def _install(body: Any, status_code: int = 200) -> list[dict[str, Any]]:
        calls: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(json.loads(request.content))
            return httpx.Response(status_code, json=body)

        def _factory(settings=None, http_client=None) -> LeakOsintClient:
            transport = httpx.MockTransport(handler)
            return LeakOsintClient(
                settings or get_leakosint_settings(),
                http_client=httpx.AsyncClient(transport=transport),
            )

        monkeypatch.setattr("app.bootstrap.dependencies.create_leakosint_client", _factory)
        return calls

    return _install
