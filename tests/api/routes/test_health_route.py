"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.routes.health.router import health_check, readiness_check


@pytest.mark.asyncio
async def test_health_reports_service(app_env) -> None:
    response = await health_check()
    assert response.status == "healthy"
    assert response.service == "majic-breaches"


@pytest.mark.asyncio
async def test_readiness_ok_with_memory_store(app_env) -> None:
    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["store"]["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_not_ready_when_ping_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    store = MagicMock()
    store.ping = AsyncMock(side_effect=ConnectionError("refused"))
    monkeypatch.setattr("app.bootstrap.get_breach_store", lambda: store)

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["store"]["error"] == "ConnectionError"


@pytest.mark.asyncio
async def test_readiness_not_ready_when_ping_false(monkeypatch: pytest.MonkeyPatch) -> None:
    store = MagicMock()
    store.ping = AsyncMock(return_value=False)
    monkeypatch.setattr("app.bootstrap.get_breach_store", lambda: store)

    response = await readiness_check()

    assert response.status_code == 503
    assert json.loads(response.body)["checks"]["store"]["error"] == "ping_failed"
