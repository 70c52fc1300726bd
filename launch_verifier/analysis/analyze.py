"""Fact-to-verdict pipeline.

gather facts -> run chain checks -> aggregate score -> explain, optionally
wrapped by the response cache.
"""

from __future__ import annotations

from loguru import logger

from launch_verifier.analysis.facts import determine_status, gather_facts
from launch_verifier.cache.response_cache import CacheKey, ResponseCache
from launch_verifier.checks.registry import run_checks
from launch_verifier.models.analysis import AnalyzeRequest, AnalyzeResponse, TokenSummary
from launch_verifier.models.facts import AgeBand, TokenFacts
from launch_verifier.providers.base import TokenProvider
from launch_verifier.scoring.aggregator import aggregate_score
from launch_verifier.scoring.explain import generate_explanation
from launch_verifier.utils.ids import format_timestamp, new_analysis_id, utc_now


def build_token_summary(facts: TokenFacts) -> TokenSummary | None:
    """Flatten facts for the response; None when metadata is unknown."""
    if facts.metadata is None:
        return None
    creation = facts.creation
    return TokenSummary(
        name=facts.metadata.name,
        symbol=facts.metadata.symbol,
        decimals=facts.metadata.decimals,
        total_supply=facts.supply.total_supply if facts.supply else None,
        program_standard=facts.metadata.standard.value,
        created_at=creation.created_at if creation else None,
        age_seconds=creation.age_seconds if creation else None,
        age_band=creation.age_band.value if creation else AgeBand.UNKNOWN.value,
    )


async def analyze(request: AnalyzeRequest, provider: TokenProvider) -> AnalyzeResponse:
    """Run one full analysis. Never raises on provider failures."""
    analysis_id = new_analysis_id()
    requested_at = format_timestamp(utc_now())
    logger.debug(
        f"[ANALYZE] {analysis_id} start chain={request.chain} "
        f"addr={request.address} provider={provider.provider_name}"
    )

    facts, errors = await gather_facts(provider, request.address, request.options)
    status = determine_status(facts, errors)
    checks = run_checks(facts, request.chain)
    score = aggregate_score(checks)
    explain = generate_explanation(checks, score)

    logger.info(
        f"[ANALYZE] {analysis_id} {request.chain}:{request.address[:12]} "
        f"status={status.value} score={score.fairness_score} grade={score.grade.value} "
        f"errors={len(errors)}"
    )

    return AnalyzeResponse(
        analysis_id=analysis_id,
        requested_at=requested_at,
        chain=request.chain,
        address=request.address,
        status=status,
        token=build_token_summary(facts),
        checks=checks,
        score=score,
        explain=explain,
        errors=errors,
    )


async def analyze_with_cache(
    request: AnalyzeRequest,
    provider: TokenProvider,
    cache: ResponseCache,
) -> AnalyzeResponse:
    """Serve from cache when fresh; force_refresh skips the read but still writes."""
    key = CacheKey.for_request(request)

    if not request.options.force_refresh:
        cached = await cache.get(key)
        if cached is not None:
            logger.debug(f"[ANALYZE] Cache hit {key}")
            return cached

    response = await analyze(request, provider)
    await cache.set(key, response, cache.ttl_for_response(response))
    return response
