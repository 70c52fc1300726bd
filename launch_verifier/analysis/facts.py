"""Fact orchestration: one provider call per category, run concurrently.

A failing category is recorded as an error string and leaves its sub-record
empty; it never stops the other categories.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable

from loguru import logger

from launch_verifier.models.analysis import AnalysisStatus, AnalyzeOptions
from launch_verifier.models.facts import TokenFacts
from launch_verifier.providers.base import TokenProvider
from launch_verifier.providers.exceptions import ProviderError

# TokenFacts field -> label used in error messages
CATEGORY_LABELS: dict[str, str] = {
    "metadata": "metadata",
    "supply": "supply",
    "authorities": "authorities",
    "holders": "holders",
    "creation": "creation time",
}


async def _fetch(category: str, address: str, call: Awaitable[object]) -> tuple[str, object | None, str | None]:
    try:
        record = await call
    except ProviderError as e:
        message = f"Failed to fetch {CATEGORY_LABELS[category]}: {e.describe()}"
        logger.warning(f"[FACTS] {address[:12]} {message}")
        return category, None, message
    logger.debug(f"[FACTS] {address[:12]} {category} OK")
    return category, record, None


async def gather_facts(
    provider: TokenProvider,
    address: str,
    options: AnalyzeOptions,
) -> tuple[TokenFacts, list[str]]:
    """Fetch all fact categories for ``address``.

    Returns the (possibly partial) fact bundle and error strings in category
    order. Holder data is skipped entirely when ``include_holders`` is off.
    """
    calls: dict[str, Awaitable[object]] = {
        "metadata": provider.fetch_metadata(address),
        "supply": provider.fetch_supply(address),
        "authorities": provider.fetch_authorities(address),
    }
    if options.include_holders:
        calls["holders"] = provider.fetch_holders(address, options.max_holders)
    calls["creation"] = provider.fetch_creation_time(address)

    results = await asyncio.gather(
        *(_fetch(category, address, call) for category, call in calls.items())
    )

    facts = TokenFacts()
    errors: list[str] = []
    for category, record, error in results:
        if error is not None:
            errors.append(error)
        else:
            setattr(facts, category, record)
    return facts, errors


def determine_status(facts: TokenFacts, errors: list[str]) -> AnalysisStatus:
    """ok: no errors; partial: errors but metadata or authorities known; else error."""
    if not errors:
        return AnalysisStatus.OK
    if facts.metadata is not None or facts.authorities is not None:
        return AnalysisStatus.PARTIAL
    return AnalysisStatus.ERROR
