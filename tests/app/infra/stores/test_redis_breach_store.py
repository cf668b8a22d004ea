"""Testes do store Redis com cliente mockado."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domain.breach import SearchRequest
from app.infra.stores import RedisBlobStore, RedisBreachStore
from app.infra.stores.redis_breach_store import STATS_RESULTS_KEY, STATS_SEARCHES_KEY
from conftest import make_result


def _redis() -> MagicMock:
    client = MagicMock()
    for name in ("set", "get", "incr", "incrby", "rpush", "lrange", "hset", "hgetall", "expire", "ping"):
        setattr(client, name, AsyncMock())
    return client


@pytest.mark.asyncio
async def test_create_search_persists_and_counts() -> None:
    redis = _redis()
    store = RedisBreachStore(redis)

    search = await store.create_search("q", 50, platform="revolt")

    key, raw = redis.set.await_args.args
    assert key == f"search:{search.search_id}"
    assert json.loads(raw)["result_count"] == 0
    redis.incr.assert_awaited_once_with(STATS_SEARCHES_KEY)


@pytest.mark.asyncio
async def test_update_search_count_rewrites_record() -> None:
    redis = _redis()
    existing = SearchRequest("s1", "q", 10, 1_700_000_000_000)
    redis.get.return_value = json.dumps(existing.to_dict()).encode()
    store = RedisBreachStore(redis)

    await store.update_search_count("s1", 7)

    _, raw = redis.set.await_args.args
    assert json.loads(raw)["result_count"] == 7


@pytest.mark.asyncio
async def test_update_search_count_missing_raises() -> None:
    redis = _redis()
    redis.get.return_value = None
    with pytest.raises(KeyError):
        await RedisBreachStore(redis).update_search_count("missing", 1)


@pytest.mark.asyncio
async def test_add_results_pushes_and_increments_total() -> None:
    redis = _redis()
    store = RedisBreachStore(redis)
    results = [make_result(i, search_id="s1") for i in range(3)]

    await store.add_results(results)

    args = redis.rpush.await_args.args
    assert args[0] == "search:s1:results"
    assert len(args) == 4
    redis.incrby.assert_awaited_once_with(STATS_RESULTS_KEY, 3)


@pytest.mark.asyncio
async def test_add_results_empty_is_noop() -> None:
    redis = _redis()
    await RedisBreachStore(redis).add_results([])
    redis.rpush.assert_not_awaited()
    redis.incrby.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_results_decodes_and_skips_corrupt() -> None:
    redis = _redis()
    result = make_result(1, search_id="s1")
    redis.lrange.return_value = [json.dumps(result.to_dict()).encode(), b"{not json"]

    assert await RedisBreachStore(redis).get_results("s1") == [result]


@pytest.mark.asyncio
async def test_get_search_corrupt_payload_is_none() -> None:
    redis = _redis()
    redis.get.return_value = b"{}"
    assert await RedisBreachStore(redis).get_search("s1") is None


@pytest.mark.asyncio
async def test_get_stats_decodes_counters() -> None:
    redis = _redis()
    redis.get.side_effect = [b"5", None]

    stats = await RedisBreachStore(redis).get_stats()
    assert stats.total_searches == 5
    assert stats.total_results == 0


@pytest.mark.asyncio
async def test_blob_store_sets_ttl_and_reads_back() -> None:
    redis = _redis()
    store = RedisBlobStore(redis, ttl_seconds=60)

    blob_id = await store.put(b"content", filename="r.txt")

    key = f"blob:{blob_id}"
    redis.expire.assert_awaited_once_with(key, 60)

    redis.hgetall.return_value = {
        b"filename": b"r.txt",
        b"content_type": b"text/plain; charset=utf-8",
        b"content": b"content",
    }
    blob = await store.get(blob_id)
    assert blob is not None
    assert blob.filename == "r.txt"
    assert blob.content == b"content"


@pytest.mark.asyncio
async def test_blob_store_missing_is_none() -> None:
    redis = _redis()
    redis.hgetall.return_value = {}
    assert await RedisBlobStore(redis).get("nope") is None
