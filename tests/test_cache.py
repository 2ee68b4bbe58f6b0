"""Tests for the evaluation cache.

Uses InMemoryCache and a dict-backed Redis stand-in — no Redis server needed.
"""

from __future__ import annotations

import fnmatch

import pytest

from buildcheck import StaticCatalog, evaluate
from buildcheck.cache.redis_cache import (
    CACHE_PREFIX,
    VERSION_KEY,
    EvaluationCache,
    InMemoryCache,
    evaluation_cache_key,
)
from buildcheck.models import CompatibilityResult, Configuration


def _make(category: str, id: str, **specs):
    return {"id": id, "name": id, "category": category, "price": 5000, "specifications": specs}


def _config(storage_ids=("a", "b"), cpu_socket="AM5") -> Configuration:
    return Configuration.model_validate({
        "core": {"cpu": _make("cpu", "cpu", socket=cpu_socket)},
        "additional": {"storage": [_make("storage", s, interface="NVMe") for s in storage_ids]},
    })


# ──────────────────────────────────────────────
# Cache Key Tests
# ──────────────────────────────────────────────


class TestCacheKey:
    def test_same_inputs_same_key(self):
        assert evaluation_cache_key(_config(), "v1") == evaluation_cache_key(_config(), "v1")

    def test_different_configuration_different_key(self):
        assert evaluation_cache_key(_config(), "v1") != evaluation_cache_key(
            _config(cpu_socket="LGA1700"), "v1"
        )

    def test_catalog_version_changes_key(self):
        """A catalog update must invalidate earlier results."""
        assert evaluation_cache_key(_config(), "v1") != evaluation_cache_key(_config(), "v2")

    def test_additional_order_irrelevant(self):
        key1 = evaluation_cache_key(_config(("a", "b")), "v1")
        key2 = evaluation_cache_key(_config(("b", "a")), "v1")
        assert key1 == key2

    def test_key_has_prefix(self):
        assert evaluation_cache_key(Configuration(), "v1").startswith(CACHE_PREFIX)


# ──────────────────────────────────────────────
# InMemoryCache Tests
# ──────────────────────────────────────────────


class TestInMemoryCache:
    @pytest.mark.asyncio
    async def test_result_round_trip(self):
        cache = InMemoryCache()
        await cache.connect()

        result = evaluate(_config(), StaticCatalog())
        key = evaluation_cache_key(_config(), "v1")
        await cache.set(key, result.model_dump_json())

        cached = await cache.get(key)
        assert CompatibilityResult.model_validate_json(cached) == result

    @pytest.mark.asyncio
    async def test_get_miss(self):
        cache = InMemoryCache()
        assert await cache.get("nonexistent") is None

    @pytest.mark.asyncio
    async def test_clear_all(self):
        cache = InMemoryCache()
        await cache.set(f"{CACHE_PREFIX}a", "1")
        await cache.set(f"{CACHE_PREFIX}b", "2")
        assert await cache.clear_all() == 2
        assert await cache.get(f"{CACHE_PREFIX}a") is None

    @pytest.mark.asyncio
    async def test_stats_counts_evaluations_only(self):
        cache = InMemoryCache()
        await cache.sync_catalog_version("v1")
        await cache.set(f"{CACHE_PREFIX}k1", "v1")
        stats = await cache.stats()
        assert stats["available"] is True
        assert stats["entries"] == 1

    @pytest.mark.asyncio
    async def test_catalog_version_change_clears(self):
        cache = InMemoryCache()
        await cache.sync_catalog_version("v1")
        await cache.set(f"{CACHE_PREFIX}a", "1")

        assert await cache.sync_catalog_version("v1") == 0
        assert await cache.get(f"{CACHE_PREFIX}a") == "1"

        assert await cache.sync_catalog_version("v2") == 1
        assert await cache.get(f"{CACHE_PREFIX}a") is None
        assert await cache.get(VERSION_KEY) == "v2"

    @pytest.mark.asyncio
    async def test_disconnect(self):
        cache = InMemoryCache()
        await cache.connect()
        assert cache.available is True

        await cache.disconnect()
        assert cache.available is False
        assert await cache.set("k", "v") is False


# ──────────────────────────────────────────────
# EvaluationCache Graceful Degradation
# ──────────────────────────────────────────────


class TestEvaluationCacheDegradation:
    @pytest.mark.asyncio
    async def test_operations_when_unavailable(self):
        """All operations should return None/False when not connected."""
        cache = EvaluationCache(redis_url="redis://nonexistent:9999")

        assert await cache.get("test") is None
        assert await cache.set("test", "value") is False
        assert await cache.clear_all() == 0
        assert (await cache.stats())["available"] is False
        assert await cache.sync_catalog_version("v1") == 0

    @pytest.mark.asyncio
    async def test_connect_failure_returns_false(self):
        cache = EvaluationCache(redis_url="redis://127.0.0.1:1/0")
        assert await cache.connect() is False
        assert cache.available is False

    def test_available_property(self):
        assert EvaluationCache().available is False


# ──────────────────────────────────────────────
# EvaluationCache against a Redis stand-in
# ──────────────────────────────────────────────


class FakeRedis:
    """Dict-backed object with the subset of the redis.asyncio API the cache calls."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.expiry: dict[str, int] = {}

    async def ping(self):
        return True

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self.data[key] = value
        if ex is not None:
            self.expiry[key] = ex
        return True

    async def delete(self, *keys):
        return sum(self.data.pop(k, None) is not None for k in keys)

    async def scan_iter(self, match="*"):
        for key in list(self.data):
            if fnmatch.fnmatchcase(key, match):
                yield key

    async def aclose(self):
        pass


def _redis_cache(ttl: int = 60) -> EvaluationCache:
    cache = EvaluationCache(ttl=ttl)
    cache._redis = FakeRedis()
    cache._available = True
    return cache


class TestEvaluationCacheRedis:
    @pytest.mark.asyncio
    async def test_set_uses_ttl(self):
        cache = _redis_cache(ttl=60)
        assert await cache.set(f"{CACHE_PREFIX}a", "1") is True
        assert cache._redis.expiry[f"{CACHE_PREFIX}a"] == 60
        assert await cache.get(f"{CACHE_PREFIX}a") == "1"

    @pytest.mark.asyncio
    async def test_clear_all_drops_evaluations_only(self):
        cache = _redis_cache()
        await cache.set(f"{CACHE_PREFIX}a", "1")
        await cache.set(f"{CACHE_PREFIX}b", "2")
        cache._redis.data["other:key"] = "x"

        assert await cache.clear_all() == 2
        assert cache._redis.data == {"other:key": "x"}

    @pytest.mark.asyncio
    async def test_stats(self):
        cache = _redis_cache(ttl=60)
        await cache.sync_catalog_version("v1")
        await cache.set(f"{CACHE_PREFIX}a", "1")
        assert await cache.stats() == {"available": True, "entries": 1, "ttl": 60}

    @pytest.mark.asyncio
    async def test_catalog_version_change_clears(self):
        cache = _redis_cache()
        await cache.set(f"{CACHE_PREFIX}a", "1")

        # No marker yet: entries of unknown provenance are dropped.
        assert await cache.sync_catalog_version("v1") == 1
        assert cache._redis.data[VERSION_KEY] == "v1"
        assert VERSION_KEY not in cache._redis.expiry

        await cache.set(f"{CACHE_PREFIX}b", "2")
        assert await cache.sync_catalog_version("v1") == 0
        assert await cache.sync_catalog_version("v2") == 1
        assert await cache.stats() == {"available": True, "entries": 0, "ttl": cache.ttl}

    @pytest.mark.asyncio
    async def test_disconnect_closes_client(self):
        cache = _redis_cache()
        await cache.disconnect()
        assert cache.available is False
        assert await cache.get(f"{CACHE_PREFIX}a") is None
