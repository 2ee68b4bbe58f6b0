"""HTTP routes for the evaluation service.

The catalog and the optional cache live on ``app.state`` and are set up
by the app factory; nothing here reads module-level state. Logical
incompatibilities are a normal 200 response — only malformed input is
rejected (422, via pydantic validation).
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Request

from buildcheck.cache.redis_cache import EvaluationCache, evaluation_cache_key
from buildcheck.catalog.lookup import CatalogLookup
from buildcheck.engine.aggregator import check_limits, evaluate
from buildcheck.models.configuration import Configuration
from buildcheck.models.results import CompatibilityResult, LimitReport

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Evaluation"])


def _catalog(request: Request) -> CatalogLookup:
    return request.app.state.catalog


def _cache(request: Request) -> Optional[EvaluationCache]:
    return getattr(request.app.state, "cache", None)


# ──────────────────────────────────────────────
# Routes
# ──────────────────────────────────────────────


@router.get("/health")
async def health(request: Request):
    cache = _cache(request)
    return {
        "status": "healthy",
        "catalog_version": _catalog(request).version,
        "cache_available": cache is not None and cache.available,
        "cache": await cache.stats() if cache is not None else None,
    }


@router.post("/evaluate", response_model=CompatibilityResult)
async def evaluate_configuration(configuration: Configuration, request: Request):
    """Full compatibility report for one build snapshot.

    Safe to call on every change in a builder UI. Results are cached
    per (configuration, catalog version).
    """
    catalog = _catalog(request)
    cache = _cache(request)

    cache_key = evaluation_cache_key(configuration, catalog.version)
    if cache:
        cached = await cache.get(cache_key)
        if cached:
            return CompatibilityResult.model_validate_json(cached)

    result = evaluate(configuration, catalog)

    if cache:
        await cache.set(cache_key, result.model_dump_json())

    logger.info(
        "Evaluated build: score=%d, compatible=%s, valid=%s, %d issue(s)",
        result.score, result.is_compatible, result.is_valid, len(result.issues),
    )
    return result


@router.post("/limits", response_model=LimitReport)
async def configuration_limits(configuration: Configuration, request: Request):
    """Physical limits, slot usage and capacity violations only."""
    return check_limits(configuration, _catalog(request))
