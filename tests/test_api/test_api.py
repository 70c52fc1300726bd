"""Tests for the HTTP API."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from launch_verifier.api.app import create_app
from launch_verifier.api.dependencies import get_providers
from launch_verifier.models.facts import TokenFacts
from launch_verifier.providers.mock import MockProvider

SOL_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


class _StubRegistry:
    def __init__(self, provider: MockProvider) -> None:
        self.provider = provider
        self.requested: list[str] = []

    def get(self, chain: str) -> MockProvider:
        self.requested.append(chain)
        return self.provider


@pytest.fixture
def registry(fair_facts: TokenFacts) -> _StubRegistry:
    return _StubRegistry(MockProvider().with_facts(SOL_MINT, fair_facts))


@pytest.fixture
def client(registry: _StubRegistry) -> Iterator[TestClient]:
    app = create_app()
    app.dependency_overrides[get_providers] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client


class TestAnalyzeEndpoint:
    def test_analyze_solana_token(self, client: TestClient) -> None:
        resp = client.post("/api/v1/analyze", json={"chain": "solana", "address": SOL_MINT})

        assert resp.status_code == 200
        body = resp.json()
        assert body["schema_version"] == "1.0.0"
        assert body["status"] == "ok"
        assert body["score"]["grade"] == "Strong"
        assert body["checks"][0]["id"] == "mint_authority_disabled"
        assert body["checks"][0]["status"] == "Pass"
        assert body["token"]["program_standard"] == "SplToken"

    def test_repeat_request_served_from_cache(self, client: TestClient) -> None:
        payload = {"chain": "solana", "address": SOL_MINT}
        first = client.post("/api/v1/analyze", json=payload).json()
        second = client.post("/api/v1/analyze", json=payload).json()

        assert second["analysis_id"] == first["analysis_id"]
        assert second["requested_at"].startswith("cached_")

    def test_force_refresh(self, client: TestClient) -> None:
        payload = {"chain": "solana", "address": SOL_MINT}
        first = client.post("/api/v1/analyze", json=payload).json()
        payload["options"] = {"force_refresh": True}
        second = client.post("/api/v1/analyze", json=payload).json()

        assert second["analysis_id"] != first["analysis_id"]

    def test_chain_normalized(self, client: TestClient, registry: _StubRegistry) -> None:
        resp = client.post("/api/v1/analyze", json={"chain": " Solana ", "address": SOL_MINT})
        assert resp.status_code == 200
        assert resp.json()["chain"] == "solana"
        assert registry.requested == ["solana"]

    def test_unsupported_chain_is_400(self, client: TestClient, registry: _StubRegistry) -> None:
        resp = client.post("/api/v1/analyze", json={"chain": "bitcoin", "address": SOL_MINT})
        assert resp.status_code == 400
        assert "unsupported chain" in resp.json()["detail"]
        assert registry.requested == []

    def test_malformed_address_is_400(self, client: TestClient) -> None:
        resp = client.post("/api/v1/analyze", json={"chain": "solana", "address": "not-a-mint"})
        assert resp.status_code == 400

    def test_missing_fields_is_422(self, client: TestClient) -> None:
        resp = client.post("/api/v1/analyze", json={"chain": "solana"})
        assert resp.status_code == 422

    def test_provider_failures_still_return_body(self, client: TestClient) -> None:
        other = "So11111111111111111111111111111111111111112"
        resp = client.post("/api/v1/analyze", json={"chain": "solana", "address": other})

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "error"
        assert body["score"]["grade"] == "Compromised"
        assert len(body["errors"]) == 5


class TestHealthEndpoint:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["cache_entries"] == 0
        assert "solana" in body["chains"]

    def test_security_headers(self, client: TestClient) -> None:
        resp = client.get("/api/v1/health")
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "DENY"
