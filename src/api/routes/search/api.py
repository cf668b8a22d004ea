"""Endpoints JSON de busca.

Endpoints:
- POST /api/search: executa busca e devolve resultados normalizados
- GET /api/stats: contadores agregados
- GET /api/searches/{search_id}: busca registrada + resultados
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from app.domain.outcome import SearchFailed
from config.settings import get_leakosint_settings
from utils.errors import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

UPSTREAM_MESSAGE_CHARS = 200


class SearchBody(BaseModel):
    """Corpo de POST /api/search."""

    model_config = ConfigDict(extra="ignore")

    query: str | None = None
    limit: int | None = None
    platform: str | None = None


def _error(status_code: int, error: str, message: str, **fields: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, **fields},
    )


async def _read_body(request: Request) -> SearchBody:
    raw_body = await request.body()
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError("Invalid JSON body") from exc
    if not isinstance(payload, dict):
        raise ValidationError("JSON body must be an object")
    try:
        return SearchBody.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid search parameters") from exc


@router.post("/search", response_model=None)
async def search(request: Request) -> JSONResponse:
    """Executa uma busca síncrona."""
    from app.bootstrap import get_search_orchestrator

    try:
        body = await _read_body(request)
        query = (body.query or "").strip()
        if not query:
            raise ValidationError("Query is required")
        limit = body.limit if body.limit is not None else get_leakosint_settings().default_limit
        if limit <= 0:
            raise ValidationError("Limit must be a positive integer")
    except ValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, "validation_error", str(exc))

    try:
        orchestrator = get_search_orchestrator()
        outcome = await orchestrator.run(query, limit, platform=body.platform or "api")
        if isinstance(outcome, SearchFailed):
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "upstream_error",
                str(outcome.error)[:UPSTREAM_MESSAGE_CHARS],
                searchId=outcome.search_id,
            )
        results = await orchestrator.get_results(outcome.search_id)
    except ConfigurationError:
        logger.error("search_service_not_configured", extra={"component": "api_search"})
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "Search service not configured",
        )
    except Exception:
        logger.exception("api_search_failed", extra={"component": "api_search"})
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "Internal server error",
        )

    return JSONResponse(
        content={
            "success": True,
            "searchId": outcome.search_id,
            "resultCount": outcome.result_count,
            "results": [result.to_api_dict() for result in results],
        }
    )


@router.get("/stats", response_model=None)
async def stats() -> JSONResponse:
    """Contadores agregados de buscas e resultados."""
    from app.bootstrap import get_breach_store

    try:
        bot_stats = await get_breach_store().get_stats()
    except Exception:
        logger.exception("api_stats_failed", extra={"component": "api_stats"})
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "Internal server error",
        )
    return JSONResponse(content=bot_stats.to_api_dict())


@router.get("/searches/{search_id}", response_model=None)
async def get_search(search_id: str) -> JSONResponse:
    """Busca registrada com todos os resultados."""
    from app.bootstrap import get_breach_store

    store = get_breach_store()
    search_request = await store.get_search(search_id)
    if search_request is None:
        return _error(status.HTTP_404_NOT_FOUND, "not_found", "Search not found")

    results = await store.get_results(search_id)
    return JSONResponse(
        content={
            "search": {
                "searchId": search_request.search_id,
                "query": search_request.query,
                "limit": search_request.requested_limit,
                "timestamp": search_request.timestamp_ms,
                "resultCount": search_request.result_count,
                "platform": search_request.platform,
            },
            "results": [result.to_api_dict() for result in results],
        }
    )
