"""Tests for fact and analysis models."""

import pytest
from pydantic import ValidationError

from launch_verifier.models import (
    AgeBand,
    AnalyzeRequest,
    CheckResult,
    CheckStatus,
    Severity,
    classify_age,
)


class TestClassifyAge:
    @pytest.mark.parametrize(
        ("age", "band"),
        [
            (None, AgeBand.UNKNOWN),
            (-1, AgeBand.UNKNOWN),
            (0, AgeBand.LESS_THAN_24H),
            (86_399, AgeBand.LESS_THAN_24H),
            (86_400, AgeBand.DAY_1_TO_7),
            (604_800, AgeBand.DAY_1_TO_7),
            (604_801, AgeBand.GREATER_THAN_7D),
        ],
    )
    def test_boundaries(self, age: int | None, band: AgeBand) -> None:
        assert classify_age(age) == band


class TestCheckResult:
    def test_unknown_with_score_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CheckResult(
                id="x", label="x", category="c", status=CheckStatus.UNKNOWN,
                severity=Severity.LOW, weight=1, score_component=50,
            )

    def test_pass_without_score_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CheckResult(
                id="x", label="x", category="c", status=CheckStatus.PASS,
                severity=Severity.LOW, weight=1,
            )

    def test_weight_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CheckResult(
                id="x", label="x", category="c", status=CheckStatus.PASS,
                severity=Severity.LOW, weight=0, score_component=100,
            )

    def test_serializes_enum_values(self) -> None:
        result = CheckResult(
            id="x", label="x", category="c", status=CheckStatus.FAIL,
            severity=Severity.CRITICAL, weight=5, score_component=0,
        )
        dumped = result.model_dump(mode="json")
        assert dumped["status"] == "Fail"
        assert dumped["severity"] == "Critical"


class TestAnalyzeRequest:
    def test_option_defaults(self) -> None:
        request = AnalyzeRequest.model_validate({"chain": "solana", "address": "abc"})
        assert request.options.include_holders is True
        assert request.options.max_holders == 10
        assert request.options.force_refresh is False

    def test_negative_max_holders_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AnalyzeRequest.model_validate(
                {"chain": "solana", "address": "abc", "options": {"max_holders": -1}}
            )
