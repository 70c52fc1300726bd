"""Tests for the token age check."""

import pytest

from launch_verifier.checks.token_age import check_token_age
from launch_verifier.models.analysis import CheckStatus, Severity
from launch_verifier.models.facts import AgeBand, CreationInfo, TokenFacts


@pytest.mark.parametrize(
    ("band", "score", "interpretation"),
    [
        (AgeBand.GREATER_THAN_7D, 100, "stabilizing"),
        (AgeBand.DAY_1_TO_7, 70, "early"),
        (AgeBand.LESS_THAN_24H, 40, "extremely_fragile"),
    ],
)
def test_known_band_always_passes(band: AgeBand, score: int, interpretation: str) -> None:
    result = check_token_age(TokenFacts(creation=CreationInfo(age_band=band)))
    assert result.status == CheckStatus.PASS
    assert result.severity == Severity.LOW
    assert result.score_component == score
    assert result.value["interpretation"] == interpretation


def test_unknown_band_is_unknown() -> None:
    result = check_token_age(TokenFacts(creation=CreationInfo()))
    assert result.status == CheckStatus.UNKNOWN
    assert result.score_component is None


def test_missing_creation_is_unknown() -> None:
    result = check_token_age(TokenFacts())
    assert result.status == CheckStatus.UNKNOWN
    assert result.weight == 10
