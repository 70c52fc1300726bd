"""Deterministic plain-language explanation of a score."""

from __future__ import annotations

from collections.abc import Sequence

from launch_verifier.checks.authority import (
    FREEZE_AUTHORITY_ID,
    MINT_AUTHORITY_ID,
    OWNERSHIP_ID,
)
from launch_verifier.checks.holder_concentration import CHECK_ID as HOLDER_CONCENTRATION_ID
from launch_verifier.checks.holder_concentration import PASS_THRESHOLD
from launch_verifier.models.analysis import (
    CheckResult,
    CheckStatus,
    ExplainSection,
    Grade,
    InterpretationSection,
    ScoreResult,
    Severity,
)

SUMMARIES: dict[Grade, str] = {
    Grade.STRONG: "Structure looks sound. No major weaknesses detected.",
    Grade.MIXED: "Structure is mostly sound with some areas of concern.",
    Grade.FRAGILE: "Structure shows significant fragility. Proceed with caution.",
    Grade.COMPROMISED: "Structure is fundamentally compromised. High risk.",
}

METHOD = [
    "This tool evaluates structural fairness, not price prediction.",
    "Each check is verifiable on-chain and scored transparently.",
]

CRITICAL_FAILURE_ADVICE: dict[str, str] = {
    MINT_AUTHORITY_ID: "Mint authority exists: supply is mutable and can be inflated.",
    OWNERSHIP_ID: "Ownership not renounced: contract parameters can still be changed.",
}

HIGH_FAILURE_ADVICE: dict[str, str] = {
    FREEZE_AUTHORITY_ID: "Freeze authority exists: token balances can be frozen.",
}

CONCENTRATION_ADVICE = "High holder concentration increases structural fragility."
FAIR_LAUNCH_ADVICE = "All structural checks passed. Token appears fairly launched."
GENERIC_FAILURE_ADVICE = "Some structural checks failed. Review details above."


def _failed_with(checks: Sequence[CheckResult], severity: Severity) -> list[CheckResult]:
    return [c for c in checks if c.severity == severity and c.status == CheckStatus.FAIL]


def remediation_bullets(checks: Sequence[CheckResult]) -> list[str]:
    """Bullets in priority order: critical failures, high failures, concentration."""
    bullets: list[str] = []

    for check in _failed_with(checks, Severity.CRITICAL):
        advice = CRITICAL_FAILURE_ADVICE.get(check.id)
        if advice:
            bullets.append(advice)

    for check in _failed_with(checks, Severity.HIGH):
        advice = HIGH_FAILURE_ADVICE.get(check.id)
        if advice:
            bullets.append(advice)

    for check in checks:
        if (
            check.id == HOLDER_CONCENTRATION_ID
            and check.score_component is not None
            and check.score_component < PASS_THRESHOLD
        ):
            bullets.append(CONCENTRATION_ADVICE)

    if not bullets:
        has_failures = any(c.status == CheckStatus.FAIL for c in checks)
        bullets.append(GENERIC_FAILURE_ADVICE if has_failures else FAIR_LAUNCH_ADVICE)

    return bullets


def generate_explanation(checks: Sequence[CheckResult], score: ScoreResult) -> ExplainSection:
    return ExplainSection(
        summary=SUMMARIES[score.grade],
        method=list(METHOD),
        interpretation=InterpretationSection(what_to_do=remediation_bullets(checks)),
    )
