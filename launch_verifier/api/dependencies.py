"""FastAPI dependencies: cache and provider registry from app state."""

from __future__ import annotations

from fastapi import Request

from launch_verifier.cache.response_cache import ResponseCache
from launch_verifier.providers.registry import ProviderRegistry


def get_cache(request: Request) -> ResponseCache:
    return request.app.state.cache


def get_providers(request: Request) -> ProviderRegistry:
    return request.app.state.providers
