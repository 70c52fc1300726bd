"""Chain-aware check selection.

Each check is a pure function of the fact bundle; order here is the order
results appear in the response.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from launch_verifier.checks.authority import (
    check_freeze_authority_disabled,
    check_mint_authority_disabled,
    check_ownership_renounced,
)
from launch_verifier.checks.families import ChainFamily, chain_family
from launch_verifier.checks.holder_concentration import check_holder_concentration
from launch_verifier.checks.standard_sanity import check_standard_sanity
from launch_verifier.checks.token_age import check_token_age
from launch_verifier.models.analysis import CheckResult
from launch_verifier.models.facts import TokenFacts

Check = Callable[[TokenFacts], CheckResult]


def checks_for_chain(chain: str) -> list[Check]:
    family = chain_family(chain)
    if family == ChainFamily.SOLANA:
        return [
            check_mint_authority_disabled,
            check_freeze_authority_disabled,
            check_holder_concentration,
            check_token_age,
            partial(check_standard_sanity, chain=chain),
        ]
    if family == ChainFamily.EVM:
        return [
            check_ownership_renounced,
            check_holder_concentration,
            check_token_age,
            partial(check_standard_sanity, chain=chain),
        ]
    return [check_holder_concentration, check_token_age]


def run_checks(facts: TokenFacts, chain: str) -> list[CheckResult]:
    return [check(facts) for check in checks_for_chain(chain)]
