"""Chain -> provider selection and address validation.

Providers hold an httpx client each, so they are built once per chain and
reused across requests; ``close()`` releases them on shutdown.
"""

from __future__ import annotations

import re

import base58
from loguru import logger

from config.settings import Settings
from launch_verifier.providers.alchemy import NETWORKS as ALCHEMY_NETWORKS
from launch_verifier.providers.alchemy import AlchemyProvider
from launch_verifier.providers.base import TokenProvider
from launch_verifier.providers.exceptions import InvalidAddressError, UnsupportedChainError
from launch_verifier.providers.helius import HeliusProvider

SOLANA_CHAINS = frozenset({"solana"})
EVM_CHAINS = frozenset(ALCHEMY_NETWORKS)

_EVM_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def supported_chains() -> list[str]:
    return sorted(SOLANA_CHAINS | EVM_CHAINS)


def validate_address(chain: str, address: str) -> str:
    """Return the address normalized for its chain family, or raise."""
    address = address.strip()
    if chain in SOLANA_CHAINS:
        try:
            decoded = base58.b58decode(address)
        except ValueError as e:
            raise InvalidAddressError(f"not a base58 Solana address: {address!r}") from e
        if len(decoded) != 32:
            raise InvalidAddressError(f"Solana address must decode to 32 bytes: {address!r}")
        return address
    if chain in EVM_CHAINS:
        if not _EVM_ADDRESS_RE.match(address):
            raise InvalidAddressError(f"not a 0x-prefixed 20-byte EVM address: {address!r}")
        return address.lower()
    raise UnsupportedChainError(f"unsupported chain: {chain!r}")


def provider_for_chain(chain: str, settings: Settings) -> TokenProvider:
    """Build a fresh provider for ``chain`` from settings."""
    if chain in SOLANA_CHAINS:
        return HeliusProvider(
            settings.helius_api_key,
            settings.helius_rpc_url,
            timeout=settings.provider_timeout_sec,
            max_rps=settings.provider_max_rps,
            max_retries=settings.provider_max_retries,
            max_signature_pages=settings.signature_max_pages,
        )
    if chain in EVM_CHAINS:
        return AlchemyProvider(
            settings.alchemy_api_key,
            chain,
            timeout=settings.provider_timeout_sec,
            max_rps=settings.provider_max_rps,
            max_retries=settings.provider_max_retries,
        )
    raise UnsupportedChainError(f"unsupported chain: {chain!r}")


class ProviderRegistry:
    """Lazily builds and caches one provider per chain."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._providers: dict[str, TokenProvider] = {}

    def get(self, chain: str) -> TokenProvider:
        provider = self._providers.get(chain)
        if provider is None:
            provider = provider_for_chain(chain, self._settings)
            logger.debug(f"[PROVIDERS] Created {provider.provider_name} provider for {chain}")
            self._providers[chain] = provider
        return provider

    async def close(self) -> None:
        for provider in self._providers.values():
            close = getattr(provider, "close", None)
            if close is not None:
                await close()
        self._providers.clear()
