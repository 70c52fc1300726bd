"""Check, score and request/response models for a structure analysis."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

SCHEMA_VERSION = "1.0.0"


class CheckStatus(str, Enum):
    PASS = "Pass"
    FAIL = "Fail"
    UNKNOWN = "Unknown"


class Severity(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Grade(str, Enum):
    STRONG = "Strong"
    MIXED = "Mixed"
    FRAGILE = "Fragile"
    COMPROMISED = "Compromised"


class AnalysisStatus(str, Enum):
    OK = "ok"
    PARTIAL = "partial"
    ERROR = "error"


class CheckResult(BaseModel):
    """Outcome of one structural check.

    value / evidence are free-form diagnostics for the reader. Scoring never
    looks at them.
    """

    id: str
    label: str
    category: str
    status: CheckStatus
    severity: Severity
    value: Any = None
    evidence: dict[str, Any] = {}
    weight: int = Field(gt=0)
    score_component: int | None = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def _score_matches_status(self) -> "CheckResult":
        has_score = self.score_component is not None
        if has_score == (self.status == CheckStatus.UNKNOWN):
            raise ValueError(
                f"check {self.id}: score_component must be set iff status is not Unknown"
            )
        return self

    @property
    def is_critical_failure(self) -> bool:
        return self.severity == Severity.CRITICAL and self.status == CheckStatus.FAIL


class ScoreComponent(BaseModel):
    id: str
    weight: int
    component_score: int | None = None
    weighted_points: float | None = None


class ScoreResult(BaseModel):
    model: str = "weighted_sum_v1"
    fairness_score: int | None = None
    grade: Grade
    components: list[ScoreComponent] = []
    weights_total: int = 0
    notes: list[str] = []


class AnalyzeOptions(BaseModel):
    include_holders: bool = True
    max_holders: int = Field(default=10, ge=0)
    force_refresh: bool = False


class AnalyzeRequest(BaseModel):
    chain: str
    address: str
    options: AnalyzeOptions = Field(default_factory=AnalyzeOptions)


class TokenSummary(BaseModel):
    """Flattened token facts echoed back in the response."""

    name: str | None = None
    symbol: str | None = None
    decimals: int | None = None
    total_supply: float | None = None
    program_standard: str
    created_at: str | None = None
    age_seconds: int | None = None
    age_band: str = "Unknown"


class InterpretationSection(BaseModel):
    what_to_do: list[str] = []


class ExplainSection(BaseModel):
    summary: str
    method: list[str] = []
    interpretation: InterpretationSection = Field(default_factory=InterpretationSection)


class AnalyzeResponse(BaseModel):
    schema_version: str = SCHEMA_VERSION
    analysis_id: str
    requested_at: str
    chain: str
    address: str
    status: AnalysisStatus
    token: TokenSummary | None = None
    checks: list[CheckResult] = []
    score: ScoreResult
    explain: ExplainSection
    errors: list[str] = []
