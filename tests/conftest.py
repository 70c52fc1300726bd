"""Shared test fixtures."""

import pytest

from launch_verifier.models.facts import (
    AgeBand,
    AuthorityInfo,
    CreationInfo,
    HolderBalance,
    HolderInfo,
    Metadata,
    SupplyInfo,
    TokenFacts,
    TokenStandard,
)


class FakeClock:
    """Manually advanced stand-in for time.time()."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fair_facts() -> TokenFacts:
    """Solana token with no authorities, spread holders, older than a week."""
    return TokenFacts(
        metadata=Metadata(name="Fair", symbol="FAIR", decimals=6, standard=TokenStandard.SPL_TOKEN),
        supply=SupplyInfo(total_supply_raw="1000000000000", total_supply=1_000_000.0),
        authorities=AuthorityInfo(mint_authority=None, freeze_authority=None, mint_mutable=False),
        holders=HolderInfo(
            top1_pct=8.5,
            top5_pct=28.0,
            top_holders=[
                HolderBalance(address=f"Holder{i}", balance_raw="1", pct_of_supply=8.5 - i)
                for i in range(5)
            ],
        ),
        creation=CreationInfo(
            created_at="2026-01-01T00:00:00Z",
            age_seconds=30 * 86_400,
            age_band=AgeBand.GREATER_THAN_7D,
        ),
    )
