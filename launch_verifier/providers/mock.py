"""Deterministic in-memory provider for tests and offline runs."""

from __future__ import annotations

from launch_verifier.models.facts import (
    AuthorityInfo,
    CreationInfo,
    HolderInfo,
    Metadata,
    SupplyInfo,
    TokenFacts,
)
from launch_verifier.providers.exceptions import NotFoundError, ProviderError

CATEGORIES = ("metadata", "supply", "authorities", "holders", "creation")


class MockProvider:
    """Serves pre-registered TokenFacts.

    A sub-record that is None in the registered facts raises NotFoundError,
    so partially-populated facts exercise the partial-failure path. Explicit
    failures can be injected per address and category.
    """

    def __init__(self, name: str = "mock") -> None:
        self._name = name
        self._facts: dict[str, TokenFacts] = {}
        self._failures: dict[tuple[str, str], ProviderError] = {}
        self.calls: list[tuple[str, str]] = []

    @property
    def provider_name(self) -> str:
        return self._name

    def with_facts(self, address: str, facts: TokenFacts) -> "MockProvider":
        self._facts[address] = facts
        return self

    def with_failure(
        self, address: str, error: ProviderError, *categories: str
    ) -> "MockProvider":
        """Fail the given categories (all of them when none are named)."""
        for category in categories or CATEGORIES:
            if category not in CATEGORIES:
                raise ValueError(f"unknown fact category: {category}")
            self._failures[(address, category)] = error
        return self

    def _lookup(self, address: str, category: str):
        self.calls.append((category, address))
        error = self._failures.get((address, category))
        if error is not None:
            raise error
        facts = self._facts.get(address)
        record = getattr(facts, category) if facts is not None else None
        if record is None:
            raise NotFoundError(f"{category} not registered for {address}")
        return record.model_copy(deep=True)

    async def fetch_metadata(self, address: str) -> Metadata:
        return self._lookup(address, "metadata")

    async def fetch_supply(self, address: str) -> SupplyInfo:
        return self._lookup(address, "supply")

    async def fetch_authorities(self, address: str) -> AuthorityInfo:
        return self._lookup(address, "authorities")

    async def fetch_holders(self, address: str, limit: int) -> HolderInfo:
        holders = self._lookup(address, "holders")
        holders.top_holders = holders.top_holders[:limit]
        return holders

    async def fetch_creation_time(self, address: str) -> CreationInfo:
        return self._lookup(address, "creation")
