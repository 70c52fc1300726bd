"""Declared token interface vs. what the chain family expects.

Solana mints must be owned by the SPL Token or Token-2022 program. EVM
tokens must look like ERC-20 and expose decimals(). A declared Unknown
standard is High severity on any chain.
"""

from __future__ import annotations

from launch_verifier.checks.families import ChainFamily, chain_family
from launch_verifier.models.analysis import CheckResult, CheckStatus, Severity
from launch_verifier.models.facts import Metadata, TokenFacts, TokenStandard

CHECK_ID = "standard_sanity"
WEIGHT = 10

SOLANA_STANDARDS = frozenset({TokenStandard.SPL_TOKEN, TokenStandard.SPL_TOKEN_2022})


def _is_standard(metadata: Metadata, family: ChainFamily) -> bool:
    if family == ChainFamily.SOLANA:
        return metadata.standard in SOLANA_STANDARDS
    if family == ChainFamily.EVM:
        return metadata.standard == TokenStandard.ERC20 and metadata.decimals is not None
    return False


def check_standard_sanity(facts: TokenFacts, chain: str) -> CheckResult:
    metadata = facts.metadata
    if metadata is None:
        return CheckResult(
            id=CHECK_ID,
            label="Standard sanity",
            category="interface",
            status=CheckStatus.UNKNOWN,
            severity=Severity.MEDIUM,
            value=None,
            evidence={"source": "provider", "error": "metadata unavailable"},
            weight=WEIGHT,
            score_component=None,
        )

    passed = _is_standard(metadata, chain_family(chain))
    if passed:
        severity = Severity.MEDIUM
    elif metadata.standard == TokenStandard.UNKNOWN:
        severity = Severity.HIGH
    else:
        severity = Severity.MEDIUM

    return CheckResult(
        id=CHECK_ID,
        label="Standard sanity",
        category="interface",
        status=CheckStatus.PASS if passed else CheckStatus.FAIL,
        severity=severity,
        value={"standard": metadata.standard.value, "chain": chain},
        evidence={
            "source": "provider",
            "standard": metadata.standard.value,
            "decimals": metadata.decimals,
        },
        weight=WEIGHT,
        score_component=100 if passed else 0,
    )
