"""Tests for the TTL response cache."""

import asyncio

import pytest

from launch_verifier.cache.response_cache import (
    CacheKey,
    ResponseCache,
    run_cleanup_loop,
    ttl_for_response,
)
from launch_verifier.models.analysis import (
    AnalysisStatus,
    AnalyzeResponse,
    ExplainSection,
    Grade,
    ScoreResult,
    TokenSummary,
)

KEY = CacheKey(chain="solana", address="Addr111", include_holders=True, max_holders=10)


def _response(age_band: str | None = "GreaterThan7d", analysis_id: str = "analysis_1_1") -> AnalyzeResponse:
    token = None
    if age_band is not None:
        token = TokenSummary(program_standard="SplToken", age_band=age_band)
    return AnalyzeResponse(
        analysis_id=analysis_id,
        requested_at="2026-01-01T00:00:00Z",
        chain="solana",
        address="Addr111",
        status=AnalysisStatus.OK,
        token=token,
        score=ScoreResult(grade=Grade.STRONG, fairness_score=90),
        explain=ExplainSection(summary="s"),
    )


class TestTtlTable:
    @pytest.mark.parametrize(
        ("band", "ttl"),
        [("LessThan24h", 600), ("Day1To7", 3600), ("GreaterThan7d", 3600), ("Unknown", 1800), (None, 1800)],
    )
    def test_default_ttls(self, band: str | None, ttl: int) -> None:
        assert ttl_for_response(_response(band)) == ttl

    def test_configured_ttls(self) -> None:
        cache = ResponseCache(ttl_new_sec=1, ttl_mature_sec=2, ttl_unknown_sec=3)
        assert cache.ttl_for_response(_response("LessThan24h")) == 1
        assert cache.ttl_for_response(_response("Day1To7")) == 2
        assert cache.ttl_for_response(_response(None)) == 3


class TestResponseCache:
    @pytest.mark.asyncio
    async def test_get_before_expiry(self, clock) -> None:
        cache = ResponseCache(clock=clock)
        await cache.set(KEY, _response(), 600)
        clock.advance(599)

        cached = await cache.get(KEY)
        assert cached is not None
        assert cached.analysis_id == "analysis_1_1"
        assert cached.requested_at == "cached_1000"

    @pytest.mark.asyncio
    async def test_miss_at_expiry(self, clock) -> None:
        cache = ResponseCache(clock=clock)
        await cache.set(KEY, _response(), 600)
        clock.advance(600)
        assert await cache.get(KEY) is None
        # stale entry stays until cleanup or overwrite
        assert await cache.size() == 1

    @pytest.mark.asyncio
    async def test_get_returns_independent_copy(self, clock) -> None:
        cache = ResponseCache(clock=clock)
        stored = _response()
        await cache.set(KEY, stored, 600)

        first = await cache.get(KEY)
        first.errors.append("mutated")
        second = await cache.get(KEY)

        assert second.errors == []
        assert stored.requested_at == "2026-01-01T00:00:00Z"

    @pytest.mark.asyncio
    async def test_set_overwrites(self, clock) -> None:
        cache = ResponseCache(clock=clock)
        await cache.set(KEY, _response(analysis_id="analysis_1_1"), 600)
        await cache.set(KEY, _response(analysis_id="analysis_2_2"), 600)
        assert (await cache.get(KEY)).analysis_id == "analysis_2_2"
        assert await cache.size() == 1

    @pytest.mark.asyncio
    async def test_remove_and_clear(self, clock) -> None:
        cache = ResponseCache(clock=clock)
        other = KEY._replace(max_holders=5)
        await cache.set(KEY, _response(), 600)
        await cache.set(other, _response(), 600)

        assert await cache.remove(KEY) is True
        assert await cache.remove(KEY) is False
        await cache.clear()
        assert await cache.size() == 0

    @pytest.mark.asyncio
    async def test_cleanup_removes_only_expired(self, clock) -> None:
        cache = ResponseCache(clock=clock)
        short = KEY._replace(address="Short111")
        await cache.set(short, _response(), 600)
        await cache.set(KEY, _response(), 3600)
        clock.advance(1000)

        removed = await cache.cleanup()

        assert removed == 1
        assert await cache.size() == 1
        assert await cache.get(KEY) is not None

    @pytest.mark.asyncio
    async def test_cleanup_loop_runs_until_cancelled(self, clock) -> None:
        cache = ResponseCache(clock=clock)
        await cache.set(KEY, _response(), 1)
        clock.advance(10)

        task = asyncio.create_task(run_cleanup_loop(cache, 0.01))
        await asyncio.sleep(0.05)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert await cache.size() == 0


def test_cache_key_str() -> None:
    assert str(KEY) == "solana:Addr111:True:10"
