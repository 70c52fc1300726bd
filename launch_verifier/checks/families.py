from __future__ import annotations

from enum import Enum


class ChainFamily(str, Enum):
    SOLANA = "solana"
    EVM = "evm"
    OTHER = "other"


# Only chains with a dedicated check set. Anything else gets the minimal set,
# even when a provider can serve it.
SOLANA_CHAIN_IDS = frozenset({"solana"})
EVM_CHAIN_IDS = frozenset({"base", "evm", "ethereum"})


def chain_family(chain: str) -> ChainFamily:
    if chain in SOLANA_CHAIN_IDS:
        return ChainFamily.SOLANA
    if chain in EVM_CHAIN_IDS:
        return ChainFamily.EVM
    return ChainFamily.OTHER
