"""On-chain fact records gathered per token.

Every sub-record on TokenFacts is independently optional: None means the
provider could not tell us, never "zero" or "disabled".
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY


class TokenStandard(str, Enum):
    """Declared token interface."""

    SPL_TOKEN = "SplToken"
    SPL_TOKEN_2022 = "SplToken2022"
    ERC20 = "Erc20"
    UNKNOWN = "Unknown"


class AgeBand(str, Enum):
    """Coarse token age classification."""

    LESS_THAN_24H = "LessThan24h"
    DAY_1_TO_7 = "Day1To7"
    GREATER_THAN_7D = "GreaterThan7d"
    UNKNOWN = "Unknown"


def classify_age(age_seconds: int | None) -> AgeBand:
    """Map an age in seconds to its band.

    Lower bounds are inclusive: exactly 24h is Day1To7, and exactly 7 days
    is still Day1To7 (GreaterThan7d is strictly greater).
    """
    if age_seconds is None or age_seconds < 0:
        return AgeBand.UNKNOWN
    if age_seconds < SECONDS_PER_DAY:
        return AgeBand.LESS_THAN_24H
    if age_seconds <= SECONDS_PER_WEEK:
        return AgeBand.DAY_1_TO_7
    return AgeBand.GREATER_THAN_7D


class Metadata(BaseModel):
    name: str | None = None
    symbol: str | None = None
    decimals: int | None = None
    standard: TokenStandard = TokenStandard.UNKNOWN


class SupplyInfo(BaseModel):
    total_supply_raw: str | None = None
    total_supply: float | None = None  # normalized by decimals


class AuthorityInfo(BaseModel):
    """Supply-control authorities. None = renounced / not present."""

    mint_authority: str | None = None
    freeze_authority: str | None = None
    owner: str | None = None  # EVM Ownable owner
    mint_mutable: bool | None = None


class HolderBalance(BaseModel):
    address: str
    balance_raw: str
    balance: float | None = None
    pct_of_supply: float | None = None


class HolderInfo(BaseModel):
    """Holder distribution. Percentages are 0-100 of total supply."""

    top1_pct: float | None = None
    top5_pct: float | None = None
    top_holders: list[HolderBalance] = []


class CreationInfo(BaseModel):
    created_at: str | None = None  # ISO-8601 UTC
    age_seconds: int | None = None
    age_band: AgeBand = AgeBand.UNKNOWN


class TokenFacts(BaseModel):
    """Partially-populated fact bundle for one analysis."""

    metadata: Metadata | None = None
    supply: SupplyInfo | None = None
    authorities: AuthorityInfo | None = None
    holders: HolderInfo | None = None
    creation: CreationInfo | None = None
