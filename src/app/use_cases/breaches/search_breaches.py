"""Use case de busca: consulta externa, normalização e persistência.

Passos estritamente sequenciais:
1. cria SearchRequest com result_count=0
2. consulta a API externa
3. normaliza o payload
4. persiste cada resultado
5. atualiza result_count com o total

Falha da consulta/normalização mantém o SearchRequest com contagem 0 e
retorna SearchFailed. Falhas do store propagam (fatais para o request).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.outcome import SearchCompleted, SearchFailed, SearchOutcome
from utils.errors import BreachLookupError, ValidationError

if TYPE_CHECKING:
    from app.domain.breach import BotStats, NormalizedResult, SearchRequest
    from app.protocols.breach_client import (
        BreachQueryClientProtocol,
        ResultNormalizerProtocol,
    )
    from app.protocols.breach_store import BreachStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100


class SearchOrchestrator:
    """Coordena client + normalizer + store para uma busca."""

    def __init__(
        self,
        client: BreachQueryClientProtocol,
        normalizer: ResultNormalizerProtocol,
        store: BreachStoreProtocol,
    ) -> None:
        self._client = client
        self._normalizer = normalizer
        self._store = store

    async def run(
        self,
        query_text: str,
        limit: int = DEFAULT_LIMIT,
        platform: str = "web",
    ) -> SearchOutcome:
        """Executa uma busca completa.

        Raises:
            ValidationError: Query vazia ou limite inválido (nada é persistido)
        """
        query_text = (query_text or "").strip()
        if not query_text:
            raise ValidationError("Search query is required")
        if limit <= 0:
            raise ValidationError("Limit must be a positive integer")

        search = await self._store.create_search(query_text, limit, platform=platform)
        logger.info(
            "search_started",
            extra={"search_id": search.search_id, "platform": platform, "limit": limit},
        )

        try:
            payload = await self._client.query(query_text, limit)
            results = self._normalizer.normalize(payload, query_text, search.search_id)
        except BreachLookupError as exc:
            logger.warning(
                "search_failed",
                extra={
                    "search_id": search.search_id,
                    "error_type": type(exc).__name__,
                },
            )
            return SearchFailed(search_id=search.search_id, error=exc)

        await self._store.add_results(results)
        await self._store.update_search_count(search.search_id, len(results))

        logger.info(
            "search_completed",
            extra={"search_id": search.search_id, "result_count": len(results)},
        )
        return SearchCompleted(search_id=search.search_id, result_count=len(results))

    async def get_search(self, search_id: str) -> SearchRequest | None:
        return await self._store.get_search(search_id)

    async def get_results(self, search_id: str) -> list[NormalizedResult]:
        return await self._store.get_results(search_id)

    async def get_stats(self) -> BotStats:
        return await self._store.get_stats()
