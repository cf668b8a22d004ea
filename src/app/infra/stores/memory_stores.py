"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING

from app.domain.breach import BotStats, NormalizedResult, SearchRequest, StoredBlob
from app.protocols.blob_store import BlobStoreProtocol
from app.protocols.breach_store import BreachStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence


def _now_ms() -> int:
    return int(time.time() * 1000)


class MemoryBreachStore(BreachStoreProtocol):
    """Store de buscas em memória: apenas para dev/test."""

    def __init__(self) -> None:
        self._searches: dict[str, SearchRequest] = {}
        self._results: dict[str, list[NormalizedResult]] = {}

    async def create_search(self, query: str, limit: int, *, platform: str = "web") -> SearchRequest:
        search = SearchRequest(
            search_id=uuid.uuid4().hex,
            query=query,
            requested_limit=limit,
            timestamp_ms=_now_ms(),
            platform=platform,
        )
        self._searches[search.search_id] = search
        self._results[search.search_id] = []
        return search

    async def update_search_count(self, search_id: str, result_count: int) -> None:
        search = self._searches[search_id]
        self._searches[search_id] = search.with_result_count(result_count)

    async def add_results(self, results: Sequence[NormalizedResult]) -> None:
        for result in results:
            self._results.setdefault(result.search_id, []).append(result)

    async def get_search(self, search_id: str) -> SearchRequest | None:
        return self._searches.get(search_id)

    async def get_results(self, search_id: str) -> list[NormalizedResult]:
        return list(self._results.get(search_id, []))

    async def get_stats(self) -> BotStats:
        return BotStats(
            total_searches=len(self._searches),
            total_results=sum(len(items) for items in self._results.values()),
        )


class MemoryBlobStore(BlobStoreProtocol):
    """Store de relatórios em memória com expiração: apenas para dev/test."""

    def __init__(self, ttl_seconds: int = 7 * 24 * 3600) -> None:
        self._ttl_seconds = ttl_seconds
        self._blobs: dict[str, tuple[StoredBlob, float]] = {}  # blob_id -> (blob, expires_at)

    def _cleanup_expired(self) -> None:
        now = time.time()
        expired = [k for k, (_, expires_at) in self._blobs.items() if expires_at < now]
        for k in expired:
            del self._blobs[k]

    async def put(
        self,
        content: bytes,
        *,
        filename: str,
        content_type: str = "text/plain; charset=utf-8",
    ) -> str:
        self._cleanup_expired()
        blob_id = uuid.uuid4().hex
        blob = StoredBlob(
            blob_id=blob_id,
            filename=filename,
            content=content,
            content_type=content_type,
        )
        self._blobs[blob_id] = (blob, time.time() + self._ttl_seconds)
        return blob_id

    async def get(self, blob_id: str) -> StoredBlob | None:
        self._cleanup_expired()
        entry = self._blobs.get(blob_id)
        return entry[0] if entry else None
