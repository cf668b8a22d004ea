"""Redis Breach Store: buscas, resultados e relatórios em Redis.

Layout de chaves:
    search:{id}          JSON do SearchRequest
    search:{id}:results  lista (RPUSH) de JSON de NormalizedResult
    stats:searches       contador de buscas
    stats:results        contador de resultados
    blob:{id}            hash com filename, content_type e content (TTL)
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from typing import TYPE_CHECKING

from app.domain.breach import BotStats, NormalizedResult, SearchRequest, StoredBlob
from app.protocols.blob_store import BlobStoreProtocol
from app.protocols.breach_store import BreachStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

SEARCH_PREFIX = "search:"
BLOB_PREFIX = "blob:"
STATS_SEARCHES_KEY = "stats:searches"
STATS_RESULTS_KEY = "stats:results"


def _decode(value: bytes | str | None) -> str | None:
    if value is None:
        return None
    return value.decode("utf-8") if isinstance(value, bytes) else value


class RedisBreachStore(BreachStoreProtocol):
    """Store de buscas usando redis.asyncio.

    Args:
        redis_client: Cliente Redis assíncrono (decode_responses=False)
    """

    def __init__(self, redis_client: AsyncRedis) -> None:
        self._redis = redis_client

    def _search_key(self, search_id: str) -> str:
        return f"{SEARCH_PREFIX}{search_id}"

    def _results_key(self, search_id: str) -> str:
        return f"{SEARCH_PREFIX}{search_id}:results"

    async def create_search(self, query: str, limit: int, *, platform: str = "web") -> SearchRequest:
        search = SearchRequest(
            search_id=uuid.uuid4().hex,
            query=query,
            requested_limit=limit,
            timestamp_ms=int(time.time() * 1000),
            platform=platform,
        )
        await self._redis.set(self._search_key(search.search_id), json.dumps(search.to_dict()))
        await self._redis.incr(STATS_SEARCHES_KEY)
        logger.debug("search_created", extra={"search_id": search.search_id, "platform": platform})
        return search

    async def update_search_count(self, search_id: str, result_count: int) -> None:
        search = await self.get_search(search_id)
        if search is None:
            raise KeyError(search_id)
        updated = search.with_result_count(result_count)
        await self._redis.set(self._search_key(search_id), json.dumps(updated.to_dict()))

    async def add_results(self, results: Sequence[NormalizedResult]) -> None:
        if not results:
            return
        by_search: dict[str, list[str]] = {}
        for result in results:
            by_search.setdefault(result.search_id, []).append(json.dumps(result.to_dict()))
        for search_id, payloads in by_search.items():
            await self._redis.rpush(self._results_key(search_id), *payloads)
        await self._redis.incrby(STATS_RESULTS_KEY, len(results))

    async def get_search(self, search_id: str) -> SearchRequest | None:
        raw = await self._redis.get(self._search_key(search_id))
        if raw is None:
            return None
        try:
            return SearchRequest.from_dict(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("search_load_error", extra={"search_id": search_id, "error": str(exc)})
            return None

    async def get_results(self, search_id: str) -> list[NormalizedResult]:
        raw_items = await self._redis.lrange(self._results_key(search_id), 0, -1)
        results: list[NormalizedResult] = []
        for raw in raw_items:
            try:
                results.append(NormalizedResult.from_dict(json.loads(raw)))
            except (json.JSONDecodeError, KeyError, TypeError) as exc:
                logger.warning(
                    "result_load_error", extra={"search_id": search_id, "error": str(exc)}
                )
        return results

    async def get_stats(self) -> BotStats:
        searches = await self._redis.get(STATS_SEARCHES_KEY)
        results = await self._redis.get(STATS_RESULTS_KEY)
        return BotStats(
            total_searches=int(_decode(searches) or 0),
            total_results=int(_decode(results) or 0),
        )

    async def ping(self) -> bool:
        return bool(await self._redis.ping())


class RedisBlobStore(BlobStoreProtocol):
    """Relatórios exportados em hashes Redis com TTL."""

    def __init__(self, redis_client: AsyncRedis, ttl_seconds: int = 7 * 24 * 3600) -> None:
        self._redis = redis_client
        self._ttl_seconds = ttl_seconds

    def _key(self, blob_id: str) -> str:
        return f"{BLOB_PREFIX}{blob_id}"

    async def put(
        self,
        content: bytes,
        *,
        filename: str,
        content_type: str = "text/plain; charset=utf-8",
    ) -> str:
        blob_id = uuid.uuid4().hex
        key = self._key(blob_id)
        await self._redis.hset(
            key,
            mapping={"filename": filename, "content_type": content_type, "content": content},
        )
        await self._redis.expire(key, self._ttl_seconds)
        logger.debug("blob_stored", extra={"blob_id": blob_id, "size": len(content)})
        return blob_id

    async def get(self, blob_id: str) -> StoredBlob | None:
        data = await self._redis.hgetall(self._key(blob_id))
        if not data:
            return None
        fields = {_decode(k): v for k, v in data.items()}
        content = fields.get("content", b"")
        return StoredBlob(
            blob_id=blob_id,
            filename=_decode(fields.get("filename")) or f"{blob_id}.txt",
            content=content if isinstance(content, bytes) else str(content).encode("utf-8"),
            content_type=_decode(fields.get("content_type")) or "text/plain; charset=utf-8",
        )
