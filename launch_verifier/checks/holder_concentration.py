"""Holder concentration check.

Two piecewise-linear curves map the top-1 and top-5 holder shares of supply
to 0-100 sub-scores; the check score is their rounded mean.

    top1 %   <=10  20   40   70+      top5 %   <=30  50   70   90+
    score     100  60   25   0        score     100  60   25   0
"""

from __future__ import annotations

from launch_verifier.models.analysis import CheckResult, CheckStatus, Severity
from launch_verifier.models.facts import TokenFacts
from launch_verifier.utils.numbers import interpolate, round_half_up

CHECK_ID = "holder_concentration"
WEIGHT = 20
PASS_THRESHOLD = 50
LOW_SEVERITY_THRESHOLD = 80

# (x0, x1, y0, y1) segments, in ascending x
TOP1_CURVE = ((10.0, 20.0, 100.0, 60.0), (20.0, 40.0, 60.0, 25.0), (40.0, 70.0, 25.0, 0.0))
TOP5_CURVE = ((30.0, 50.0, 100.0, 60.0), (50.0, 70.0, 60.0, 25.0), (70.0, 90.0, 25.0, 0.0))


def _score_curve(pct: float, curve: tuple[tuple[float, float, float, float], ...]) -> float:
    first = curve[0]
    if pct <= first[0]:
        return first[2]
    for x0, x1, y0, y1 in curve:
        if pct <= x1:
            return interpolate(pct, x0, x1, y0, y1)
    return curve[-1][3]


def score_top1(pct: float) -> float:
    return _score_curve(pct, TOP1_CURVE)


def score_top5(pct: float) -> float:
    return _score_curve(pct, TOP5_CURVE)


def _unknown() -> CheckResult:
    return CheckResult(
        id=CHECK_ID,
        label="Holder concentration",
        category="distribution",
        status=CheckStatus.UNKNOWN,
        severity=Severity.MEDIUM,
        value=None,
        evidence={"source": "provider", "error": "holder data unavailable"},
        weight=WEIGHT,
        score_component=None,
    )


def check_holder_concentration(facts: TokenFacts) -> CheckResult:
    holders = facts.holders
    if holders is None or holders.top1_pct is None or holders.top5_pct is None:
        return _unknown()

    top1, top5 = holders.top1_pct, holders.top5_pct
    score1 = score_top1(top1)
    score5 = score_top5(top5)
    combined = round_half_up((score1 + score5) / 2.0)

    if combined >= LOW_SEVERITY_THRESHOLD:
        severity = Severity.LOW
    elif combined >= PASS_THRESHOLD:
        severity = Severity.MEDIUM
    else:
        severity = Severity.HIGH

    return CheckResult(
        id=CHECK_ID,
        label="Holder concentration",
        category="distribution",
        status=CheckStatus.PASS if combined >= PASS_THRESHOLD else CheckStatus.FAIL,
        severity=severity,
        value={
            "top1_pct": top1,
            "top5_pct": top5,
            "sub_scores": {"top1": score1, "top5": score5},
        },
        evidence={
            "source": "provider",
            "top1_pct": top1,
            "top5_pct": top5,
            "holders_sampled": len(holders.top_holders),
            "method": "supply-weighted holder distribution",
        },
        weight=WEIGHT,
        score_component=combined,
    )
