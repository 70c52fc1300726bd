from __future__ import annotations

from launch_verifier.models.analysis import CheckResult, CheckStatus, Severity
from launch_verifier.models.facts import AgeBand, TokenFacts

CHECK_ID = "token_age"
WEIGHT = 10

# band -> (score, interpretation). Age is informational: a young token
# scores lower but never fails.
AGE_SCORES: dict[AgeBand, tuple[int, str]] = {
    AgeBand.GREATER_THAN_7D: (100, "stabilizing"),
    AgeBand.DAY_1_TO_7: (70, "early"),
    AgeBand.LESS_THAN_24H: (40, "extremely_fragile"),
}


def check_token_age(facts: TokenFacts) -> CheckResult:
    creation = facts.creation
    scored = AGE_SCORES.get(creation.age_band) if creation is not None else None
    if scored is None:
        return CheckResult(
            id=CHECK_ID,
            label="Token age",
            category="temporal",
            status=CheckStatus.UNKNOWN,
            severity=Severity.LOW,
            value=None,
            evidence={"source": "provider", "error": "creation time unavailable"},
            weight=WEIGHT,
            score_component=None,
        )

    score, interpretation = scored
    return CheckResult(
        id=CHECK_ID,
        label="Token age",
        category="temporal",
        status=CheckStatus.PASS,
        severity=Severity.LOW,
        value={
            "age_band": creation.age_band.value,
            "age_seconds": creation.age_seconds,
            "interpretation": interpretation,
        },
        evidence={
            "source": "provider",
            "created_at": creation.created_at,
            "age_seconds": creation.age_seconds,
        },
        weight=WEIGHT,
        score_component=score,
    )
