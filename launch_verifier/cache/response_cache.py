"""In-process response cache with age-derived TTL.

Entries expire passively: ``get`` ignores stale entries and ``cleanup``
drops them in bulk. Every operation runs under one asyncio.Lock; the
analysis itself runs outside it, so a slow provider never blocks readers.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

from loguru import logger

from launch_verifier.models.analysis import AnalyzeRequest, AnalyzeResponse
from launch_verifier.models.facts import AgeBand

TTL_NEW_SEC = 600  # < 24h: structure still moving fast
TTL_MATURE_SEC = 3600
TTL_UNKNOWN_SEC = 1800


class CacheKey(NamedTuple):
    chain: str
    address: str
    include_holders: bool
    max_holders: int

    @classmethod
    def for_request(cls, request: AnalyzeRequest) -> "CacheKey":
        return cls(
            chain=request.chain,
            address=request.address,
            include_holders=request.options.include_holders,
            max_holders=request.options.max_holders,
        )

    def __str__(self) -> str:
        return f"{self.chain}:{self.address}:{self.include_holders}:{self.max_holders}"


@dataclass(frozen=True)
class CacheEntry:
    response: AnalyzeResponse
    cached_at: float
    ttl_seconds: int

    def is_fresh(self, now: float) -> bool:
        return max(0.0, now - self.cached_at) < self.ttl_seconds


def ttl_for_response(
    response: AnalyzeResponse,
    *,
    new_sec: int = TTL_NEW_SEC,
    mature_sec: int = TTL_MATURE_SEC,
    unknown_sec: int = TTL_UNKNOWN_SEC,
) -> int:
    """TTL from the token's age band; intermediate when age or metadata is unknown."""
    if response.token is None:
        return unknown_sec
    band = response.token.age_band
    if band == AgeBand.LESS_THAN_24H.value:
        return new_sec
    if band == AgeBand.UNKNOWN.value:
        return unknown_sec
    return mature_sec


class ResponseCache:
    """Key -> CacheEntry map guarded by a single lock."""

    def __init__(
        self,
        *,
        ttl_new_sec: int = TTL_NEW_SEC,
        ttl_mature_sec: int = TTL_MATURE_SEC,
        ttl_unknown_sec: int = TTL_UNKNOWN_SEC,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._clock = clock
        self._ttl_new = ttl_new_sec
        self._ttl_mature = ttl_mature_sec
        self._ttl_unknown = ttl_unknown_sec

    def ttl_for_response(self, response: AnalyzeResponse) -> int:
        return ttl_for_response(
            response,
            new_sec=self._ttl_new,
            mature_sec=self._ttl_mature,
            unknown_sec=self._ttl_unknown,
        )

    async def get(self, key: CacheKey) -> AnalyzeResponse | None:
        """Fresh copy of the cached response, marked as served from cache."""
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None or not entry.is_fresh(self._clock()):
                return None
            response = entry.response.model_copy(deep=True)
        response.requested_at = f"cached_{int(entry.cached_at)}"
        return response

    async def set(self, key: CacheKey, response: AnalyzeResponse, ttl_seconds: int) -> None:
        entry = CacheEntry(
            response=response.model_copy(deep=True),
            cached_at=self._clock(),
            ttl_seconds=ttl_seconds,
        )
        async with self._lock:
            self._entries[key] = entry
        logger.debug(f"[CACHE] Stored {key} ttl={ttl_seconds}s")

    async def remove(self, key: CacheKey) -> bool:
        async with self._lock:
            return self._entries.pop(key, None) is not None

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    async def cleanup(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        async with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if not e.is_fresh(now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug(f"[CACHE] Evicted {len(expired)} expired entries")
        return len(expired)

    async def size(self) -> int:
        async with self._lock:
            return len(self._entries)


async def run_cleanup_loop(cache: ResponseCache, interval_sec: float) -> None:
    """Periodic eviction task; cancel it to stop."""
    while True:
        await asyncio.sleep(interval_sec)
        await cache.cleanup()
