"""BuildCheck — FastAPI application.

Thin HTTP wrapper around ``buildcheck.engine.aggregator.evaluate``.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from buildcheck import __version__
from buildcheck.api.routes import router
from buildcheck.cache.redis_cache import EvaluationCache
from buildcheck.catalog.lookup import CatalogLookup, StaticCatalog

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────
# Lifespan — startup / shutdown
# ──────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the cache on startup, close it on shutdown."""
    cache = app.state.cache or EvaluationCache()
    cache_connected = await cache.connect()
    app.state.cache = cache if cache_connected else None

    if cache_connected:
        await cache.sync_catalog_version(app.state.catalog.version)
        logger.info("Evaluation cache ready")
    else:
        logger.warning("Cache unavailable — evaluating without memoization")

    logger.info(
        "Catalog %s loaded (%s)", app.state.catalog.version, type(app.state.catalog).__name__
    )

    yield

    if cache_connected:
        await cache.disconnect()
    logger.info("Shutting down BuildCheck")


# ──────────────────────────────────────────────
# App
# ──────────────────────────────────────────────


def create_app(
    catalog: Optional[CatalogLookup] = None,
    cache: Optional[EvaluationCache] = None,
) -> FastAPI:
    """Factory function — creates and configures the FastAPI app.

    ``catalog`` defaults to the bundled reference tables. Without a
    ``cache``, the lifespan tries Redis at ``REDIS_URL``.
    """
    app = FastAPI(
        title="BuildCheck",
        description=(
            "Compatibility and capacity checks for PC build configurations.\n\n"
            "- `POST /evaluate`: full compatibility report with score\n"
            "- `POST /limits`: physical limits, slot usage and violations\n"
        ),
        version=__version__,
        lifespan=lifespan,
    )
    app.state.catalog = catalog or StaticCatalog()
    app.state.cache = cache

    allowed_origins = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173",
    ).split(",")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in allowed_origins],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/", tags=["Root"])
    async def root():
        return {
            "engine": "BuildCheck",
            "version": __version__,
            "catalog_version": app.state.catalog.version,
        }

    return app


# ──────────────────────────────────────────────
# Entrypoint
# ──────────────────────────────────────────────

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "buildcheck.api.app:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
