"""Supply-control authority checks: mint, freeze, EVM ownership."""

from __future__ import annotations

from launch_verifier.models.analysis import CheckResult, CheckStatus, Severity
from launch_verifier.models.facts import TokenFacts

MINT_AUTHORITY_ID = "mint_authority_disabled"
FREEZE_AUTHORITY_ID = "freeze_authority_disabled"
OWNERSHIP_ID = "ownership_renounced"

MINT_AUTHORITY_WEIGHT = 25
FREEZE_AUTHORITY_WEIGHT = 20
OWNERSHIP_WEIGHT = 20


def _unknown(check_id: str, label: str, category: str, severity: Severity, weight: int) -> CheckResult:
    return CheckResult(
        id=check_id,
        label=label,
        category=category,
        status=CheckStatus.UNKNOWN,
        severity=severity,
        value=None,
        evidence={"source": "provider", "error": "authority data unavailable"},
        weight=weight,
        score_component=None,
    )


def _pass_fail(passed: bool) -> tuple[CheckStatus, int]:
    return (CheckStatus.PASS, 100) if passed else (CheckStatus.FAIL, 0)


def check_mint_authority_disabled(facts: TokenFacts) -> CheckResult:
    """Pass iff nobody can mint new supply."""
    if facts.authorities is None:
        return _unknown(
            MINT_AUTHORITY_ID, "Mint authority disabled", "supply_control",
            Severity.CRITICAL, MINT_AUTHORITY_WEIGHT,
        )

    mint_authority = facts.authorities.mint_authority
    status, score = _pass_fail(mint_authority is None)
    return CheckResult(
        id=MINT_AUTHORITY_ID,
        label="Mint authority disabled",
        category="supply_control",
        status=status,
        severity=Severity.CRITICAL,
        value=mint_authority is None,
        evidence={"source": "provider", "mint_authority": mint_authority},
        weight=MINT_AUTHORITY_WEIGHT,
        score_component=score,
    )


def check_freeze_authority_disabled(facts: TokenFacts) -> CheckResult:
    """Pass iff nobody can freeze holder balances."""
    if facts.authorities is None:
        return _unknown(
            FREEZE_AUTHORITY_ID, "Freeze authority disabled", "supply_control",
            Severity.HIGH, FREEZE_AUTHORITY_WEIGHT,
        )

    freeze_authority = facts.authorities.freeze_authority
    status, score = _pass_fail(freeze_authority is None)
    return CheckResult(
        id=FREEZE_AUTHORITY_ID,
        label="Freeze authority disabled",
        category="supply_control",
        status=status,
        severity=Severity.HIGH,
        value=freeze_authority is None,
        evidence={"source": "provider", "freeze_authority": freeze_authority},
        weight=FREEZE_AUTHORITY_WEIGHT,
        score_component=score,
    )


def check_ownership_renounced(facts: TokenFacts) -> CheckResult:
    """Pass iff the contract has no owner. A known result is always Critical."""
    if facts.authorities is None:
        return _unknown(
            OWNERSHIP_ID, "Ownership renounced", "authority",
            Severity.HIGH, OWNERSHIP_WEIGHT,
        )

    owner = facts.authorities.owner
    status, score = _pass_fail(owner is None)
    return CheckResult(
        id=OWNERSHIP_ID,
        label="Ownership renounced",
        category="authority",
        status=status,
        severity=Severity.CRITICAL,
        value=owner,
        evidence={"source": "provider", "owner": owner, "is_renounced": owner is None},
        weight=OWNERSHIP_WEIGHT,
        score_component=score,
    )
