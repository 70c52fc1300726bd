"""Analyze endpoint: one token per request."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from loguru import logger

from config.settings import settings
from launch_verifier.analysis.analyze import analyze_with_cache
from launch_verifier.api.app import limiter
from launch_verifier.api.dependencies import get_cache, get_providers
from launch_verifier.cache.response_cache import ResponseCache
from launch_verifier.models.analysis import AnalyzeRequest, AnalyzeResponse
from launch_verifier.providers.exceptions import InvalidAddressError, UnsupportedChainError
from launch_verifier.providers.registry import ProviderRegistry, validate_address

router = APIRouter(prefix="/api/v1", tags=["analyze"])


@router.post("/analyze", response_model=AnalyzeResponse)
@limiter.limit(settings.analyze_rate_limit)
async def analyze_token(
    request: Request,
    body: AnalyzeRequest,
    cache: ResponseCache = Depends(get_cache),
    providers: ProviderRegistry = Depends(get_providers),
) -> AnalyzeResponse:
    """Structural fairness analysis for ``body.address`` on ``body.chain``.

    Unsupported chains and malformed addresses are rejected with 400 before
    any provider call.
    """
    chain = body.chain.strip().lower()
    try:
        address = validate_address(chain, body.address)
        provider = providers.get(chain)
    except (UnsupportedChainError, InvalidAddressError) as e:
        logger.debug(f"[API] Rejected {body.chain}:{body.address}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    logger.info(f"[API] Analyze {chain}:{address} force_refresh={body.options.force_refresh}")
    normalized = body.model_copy(update={"chain": chain, "address": address})
    return await analyze_with_cache(normalized, provider, cache)
