"""Fact provider capability.

A provider answers five independent questions about a token address. Each
call either returns its fact record or raises a ProviderError subclass;
implementations must bound every upstream call with a timeout.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from launch_verifier.models.facts import (
    AuthorityInfo,
    CreationInfo,
    HolderInfo,
    Metadata,
    SupplyInfo,
)


@runtime_checkable
class TokenProvider(Protocol):
    @property
    def provider_name(self) -> str: ...

    async def fetch_metadata(self, address: str) -> Metadata: ...

    async def fetch_supply(self, address: str) -> SupplyInfo: ...

    async def fetch_authorities(self, address: str) -> AuthorityInfo: ...

    async def fetch_holders(self, address: str, limit: int) -> HolderInfo: ...

    async def fetch_creation_time(self, address: str) -> CreationInfo: ...
