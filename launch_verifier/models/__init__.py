from launch_verifier.models.analysis import (
    AnalysisStatus,
    AnalyzeOptions,
    AnalyzeRequest,
    AnalyzeResponse,
    CheckResult,
    CheckStatus,
    ExplainSection,
    Grade,
    InterpretationSection,
    ScoreComponent,
    ScoreResult,
    Severity,
    TokenSummary,
)
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
    classify_age,
)

__all__ = [
    "AgeBand",
    "AnalysisStatus",
    "AnalyzeOptions",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "AuthorityInfo",
    "CheckResult",
    "CheckStatus",
    "CreationInfo",
    "ExplainSection",
    "Grade",
    "HolderBalance",
    "HolderInfo",
    "InterpretationSection",
    "Metadata",
    "ScoreComponent",
    "ScoreResult",
    "Severity",
    "SupplyInfo",
    "TokenFacts",
    "TokenStandard",
    "TokenSummary",
    "classify_age",
]
