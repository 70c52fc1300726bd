"""Weighted-sum score aggregation.

fairness_score = round(sum(weight * score / 100) / sum(weight) * 100) over
checks that produced a score. Unknown checks are listed in components but
add nothing to either sum.

Grading:
- any Critical check that failed -> Compromised, whatever the number
- >= 80 Strong, >= 60 Mixed, >= 40 Fragile, else Compromised
- no usable checks -> Compromised (missing evidence is never good news)
"""

from __future__ import annotations

from collections.abc import Sequence

from launch_verifier.models.analysis import CheckResult, Grade, ScoreComponent, ScoreResult
from launch_verifier.utils.numbers import round_half_up

MODEL_NAME = "weighted_sum_v1"

GRADE_THRESHOLDS: tuple[tuple[int, Grade], ...] = (
    (80, Grade.STRONG),
    (60, Grade.MIXED),
    (40, Grade.FRAGILE),
)

SCORE_NOTE = "Composite score summarizes structure; individual checks are the source of truth."


def grade_from_score(score: int) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.COMPROMISED


def aggregate_score(checks: Sequence[CheckResult]) -> ScoreResult:
    weights_total = 0
    points_total = 0.0
    components: list[ScoreComponent] = []
    has_critical_failure = False

    for check in checks:
        if check.score_component is not None:
            weighted = check.weight * (check.score_component / 100.0)
            weights_total += check.weight
            points_total += weighted
            components.append(ScoreComponent(
                id=check.id,
                weight=check.weight,
                component_score=check.score_component,
                weighted_points=weighted,
            ))
        else:
            components.append(ScoreComponent(id=check.id, weight=check.weight))

        if check.is_critical_failure:
            has_critical_failure = True

    fairness_score = (
        round_half_up(points_total / weights_total * 100.0) if weights_total > 0 else None
    )

    if has_critical_failure or fairness_score is None:
        grade = Grade.COMPROMISED
    else:
        grade = grade_from_score(fairness_score)

    return ScoreResult(
        model=MODEL_NAME,
        fairness_score=fairness_score,
        grade=grade,
        components=components,
        weights_total=weights_total,
        notes=[SCORE_NOTE],
    )
