"""Tests for concurrent fact gathering and status derivation."""

import pytest

from launch_verifier.analysis.facts import determine_status, gather_facts
from launch_verifier.models.analysis import AnalysisStatus, AnalyzeOptions
from launch_verifier.models.facts import AuthorityInfo, Metadata, TokenFacts
from launch_verifier.providers.exceptions import NetworkError, ProviderTimeoutError
from launch_verifier.providers.mock import MockProvider

ADDR = "TokenAddr111"


class TestGatherFacts:
    @pytest.mark.asyncio
    async def test_all_categories_fetched(self, fair_facts: TokenFacts) -> None:
        provider = MockProvider().with_facts(ADDR, fair_facts)
        facts, errors = await gather_facts(provider, ADDR, AnalyzeOptions())
        assert errors == []
        assert facts == fair_facts

    @pytest.mark.asyncio
    async def test_failure_does_not_stop_other_categories(self, fair_facts: TokenFacts) -> None:
        provider = (
            MockProvider()
            .with_facts(ADDR, fair_facts)
            .with_failure(ADDR, NetworkError("connection reset"), "holders")
        )
        facts, errors = await gather_facts(provider, ADDR, AnalyzeOptions())
        assert errors == ["Failed to fetch holders: NetworkError(connection reset)"]
        assert facts.holders is None
        assert facts.metadata is not None
        assert facts.creation is not None

    @pytest.mark.asyncio
    async def test_errors_in_category_order(self) -> None:
        provider = MockProvider().with_failure(ADDR, ProviderTimeoutError())
        _, errors = await gather_facts(provider, ADDR, AnalyzeOptions())
        assert errors == [
            "Failed to fetch metadata: Timeout",
            "Failed to fetch supply: Timeout",
            "Failed to fetch authorities: Timeout",
            "Failed to fetch holders: Timeout",
            "Failed to fetch creation time: Timeout",
        ]

    @pytest.mark.asyncio
    async def test_holders_skipped_when_disabled(self, fair_facts: TokenFacts) -> None:
        provider = MockProvider().with_facts(ADDR, fair_facts)
        facts, errors = await gather_facts(provider, ADDR, AnalyzeOptions(include_holders=False))
        assert facts.holders is None
        assert errors == []
        assert ("holders", ADDR) not in provider.calls

    @pytest.mark.asyncio
    async def test_max_holders_passed_as_limit(self, fair_facts: TokenFacts) -> None:
        provider = MockProvider().with_facts(ADDR, fair_facts)
        facts, _ = await gather_facts(provider, ADDR, AnalyzeOptions(max_holders=2))
        assert len(facts.holders.top_holders) == 2

    @pytest.mark.asyncio
    async def test_unexpected_exception_propagates(self, fair_facts: TokenFacts) -> None:
        provider = MockProvider().with_facts(ADDR, fair_facts)

        async def broken(address: str) -> Metadata:
            raise RuntimeError("bug")

        provider.fetch_metadata = broken  # type: ignore[method-assign]
        with pytest.raises(RuntimeError):
            await gather_facts(provider, ADDR, AnalyzeOptions())


class TestDetermineStatus:
    def test_no_errors_is_ok(self) -> None:
        assert determine_status(TokenFacts(), []) == AnalysisStatus.OK

    def test_errors_with_metadata_is_partial(self) -> None:
        facts = TokenFacts(metadata=Metadata())
        assert determine_status(facts, ["x"]) == AnalysisStatus.PARTIAL

    def test_errors_with_authorities_is_partial(self) -> None:
        facts = TokenFacts(authorities=AuthorityInfo())
        assert determine_status(facts, ["x"]) == AnalysisStatus.PARTIAL

    def test_errors_without_core_facts_is_error(self) -> None:
        assert determine_status(TokenFacts(), ["x"]) == AnalysisStatus.ERROR
