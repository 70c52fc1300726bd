"""FastAPI application factory for the verifier API."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from loguru import logger
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.middleware.cors import CORSMiddleware

from config.settings import Settings, settings as default_settings
from launch_verifier.api.middleware import SecurityHeadersMiddleware
from launch_verifier.cache.response_cache import ResponseCache, run_cleanup_loop
from launch_verifier.providers.registry import ProviderRegistry

VERSION = "0.1.0"

# Rate limiter (shared instance)
limiter = Limiter(key_func=get_remote_address)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.cache = ResponseCache(
            ttl_new_sec=settings.cache_ttl_new_sec,
            ttl_mature_sec=settings.cache_ttl_mature_sec,
            ttl_unknown_sec=settings.cache_ttl_unknown_sec,
        )
        app.state.providers = ProviderRegistry(settings)
        cleanup_task = asyncio.create_task(
            run_cleanup_loop(app.state.cache, settings.cache_cleanup_interval_sec)
        )
        logger.info("[API] Verifier API ready")
        try:
            yield
        finally:
            cleanup_task.cancel()
            with suppress(asyncio.CancelledError):
                await cleanup_task
            await app.state.providers.close()
            logger.info("[API] Verifier API stopped")

    app = FastAPI(
        title="Launch Structure Verifier API",
        version=VERSION,
        docs_url="/api/docs" if settings.api_debug else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Security headers
    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    from launch_verifier.api.routers.analyze import router as analyze_router
    from launch_verifier.api.routers.health import router as health_router

    app.include_router(health_router)
    app.include_router(analyze_router)

    return app
