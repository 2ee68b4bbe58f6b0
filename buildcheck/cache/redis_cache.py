"""Redis caching layer for evaluation results.

Memoizes CompatibilityResult JSON keyed by a structural hash of the
configuration and the catalog version. Falls back gracefully when Redis
is unavailable — evaluation is pure, so the cache is only a shortcut.

Cache key strategy:
  buildcheck:eval:{sha256(catalog_version + canonical configuration)}

A new catalog version yields new keys, so stale limits are never served.
On startup, entries left by an older catalog version are dropped.

TTL: Configurable, default 30 minutes.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
from typing import Any, Dict, List, Optional

import redis.asyncio as aioredis

from buildcheck.models.configuration import Configuration

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────
# Configuration
# ──────────────────────────────────────────────

CACHE_PREFIX = "buildcheck:eval:"
DEFAULT_TTL = int(os.getenv("BUILDCHECK_CACHE_TTL", "1800"))  # 30 minutes
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# Catalog version the cached entries were computed against. No TTL.
VERSION_KEY = "buildcheck:catalog_version"


# ──────────────────────────────────────────────
# Cache Key Generation
# ──────────────────────────────────────────────


def canonical_configuration(configuration: Configuration) -> Dict[str, Any]:
    """JSON-ready dump with additional parts in a stable order.

    Additional component order carries no meaning, so two configurations
    that differ only by insertion order share a key.
    """
    data = configuration.model_dump(mode="json")
    for category, parts in data["additional"].items():
        data["additional"][category] = sorted(
            parts, key=lambda p: json.dumps(p, sort_keys=True)
        )
    return data


def evaluation_cache_key(configuration: Configuration, catalog_version: str) -> str:
    """Generate a deterministic cache key for one (configuration, catalog) pair.

    Same inputs always produce the same key.
    """
    canonical = {
        "catalog_version": catalog_version,
        "configuration": canonical_configuration(configuration),
    }
    raw = json.dumps(canonical, sort_keys=True)
    digest = hashlib.sha256(raw.encode()).hexdigest()[:16]
    return f"{CACHE_PREFIX}{digest}"


# ──────────────────────────────────────────────
# Redis Cache Client
# ──────────────────────────────────────────────


class EvaluationCache:
    """Redis-backed cache for evaluation results.

    Gracefully degrades when Redis is unavailable — all methods
    return None / False instead of raising exceptions.
    """

    def __init__(
        self,
        redis_url: str = REDIS_URL,
        ttl: int = DEFAULT_TTL,
    ) -> None:
        self.ttl = ttl
        self._redis = None
        self._redis_url = redis_url
        self._available = False

    async def connect(self) -> bool:
        """Connect to Redis. Returns True if successful."""
        try:
            self._redis = aioredis.from_url(
                self._redis_url,
                decode_responses=True,
                socket_connect_timeout=3,
                socket_timeout=3,
            )
            await self._redis.ping()
            self._available = True
            logger.info("Redis cache connected: %s", self._redis_url)
            return True
        except Exception as e:
            logger.warning("Redis unavailable: %s — caching disabled", e)
            self._available = False
            return False

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None
            self._available = False

    @property
    def available(self) -> bool:
        """Whether Redis is connected and working."""
        return self._available

    async def get(self, key: str) -> Optional[str]:
        """Get a cached result by key. Returns None on miss or error."""
        if not self._available:
            return None
        try:
            data = await self._redis.get(key)
            if data:
                logger.debug("Cache HIT: %s", key)
            else:
                logger.debug("Cache MISS: %s", key)
            return data
        except Exception as e:
            logger.warning("Cache get failed: %s", e)
            return None

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        """Cache a result. Returns True if successful."""
        if not self._available:
            return False
        try:
            await self._redis.set(key, value, ex=ttl or self.ttl)
            logger.debug("Cache SET: %s (TTL: %ds)", key, ttl or self.ttl)
            return True
        except Exception as e:
            logger.warning("Cache set failed: %s", e)
            return False

    async def _evaluation_keys(self) -> List[str]:
        return [key async for key in self._redis.scan_iter(f"{CACHE_PREFIX}*")]

    async def clear_all(self) -> int:
        """Drop every cached evaluation. The catalog version marker is kept."""
        if not self._available:
            return 0
        try:
            keys = await self._evaluation_keys()
            if keys:
                await self._redis.delete(*keys)
            logger.info("Cleared %d cached evaluations", len(keys))
            return len(keys)
        except Exception as e:
            logger.warning("Cache clear failed: %s", e)
            return 0

    async def stats(self) -> Dict[str, Any]:
        """Entry count and TTL, reported by the health endpoint."""
        if not self._available:
            return {"available": False, "entries": 0}
        try:
            entries = len(await self._evaluation_keys())
            return {"available": True, "entries": entries, "ttl": self.ttl}
        except Exception as e:
            logger.warning("Cache stats failed: %s", e)
            return {"available": False, "entries": 0}

    async def sync_catalog_version(self, version: str) -> int:
        """Drop evaluations cached under another catalog version.

        Keys embed the version, so stale entries are never served; this
        frees them at startup instead of waiting for the TTL. Returns the
        number of entries dropped.
        """
        if not self._available:
            return 0
        try:
            stored = await self._redis.get(VERSION_KEY)
        except Exception as e:
            logger.warning("Cache version check failed: %s", e)
            return 0
        dropped = 0
        if stored != version:
            dropped = await self.clear_all()
            logger.info(
                "Catalog version %s -> %s: dropped %d cached evaluations",
                stored, version, dropped,
            )
        try:
            await self._redis.set(VERSION_KEY, version)
        except Exception as e:
            logger.warning("Cache version write failed: %s", e)
        return dropped


# ──────────────────────────────────────────────
# In-Memory Cache (for tests / no Redis)
# ──────────────────────────────────────────────


class InMemoryCache(EvaluationCache):
    """Dict-based cache. No TTL enforcement."""

    def __init__(self, ttl: int = DEFAULT_TTL) -> None:
        super().__init__(ttl=ttl)
        self._store: dict[str, str] = {}
        self._available = True

    async def connect(self) -> bool:
        self._available = True
        return True

    async def disconnect(self) -> None:
        self._store.clear()
        self._available = False

    async def get(self, key: str) -> Optional[str]:
        if not self._available:
            return None
        return self._store.get(key)

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        if not self._available:
            return False
        self._store[key] = value
        return True

    async def _evaluation_keys(self) -> List[str]:
        return [key for key in self._store if key.startswith(CACHE_PREFIX)]

    async def clear_all(self) -> int:
        keys = await self._evaluation_keys()
        for key in keys:
            del self._store[key]
        return len(keys)

    async def sync_catalog_version(self, version: str) -> int:
        dropped = 0
        if self._store.get(VERSION_KEY) != version:
            dropped = await self.clear_all()
        self._store[VERSION_KEY] = version
        return dropped
