"""Health check, no auth required."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from launch_verifier.api.dependencies import get_cache
from launch_verifier.cache.response_cache import ResponseCache
from launch_verifier.providers.registry import supported_chains

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    cache_entries: int
    chains: list[str]


@router.get("/health", response_model=HealthResponse)
async def health_check(cache: ResponseCache = Depends(get_cache)) -> HealthResponse:
    from launch_verifier.api.app import VERSION

    return HealthResponse(
        status="ok",
        version=VERSION,
        cache_entries=await cache.size(),
        chains=supported_chains(),
    )
