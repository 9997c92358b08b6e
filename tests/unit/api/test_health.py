"""Tests for health check and metrics endpoints."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from auditor.api.dependencies import get_catalog_store
from auditor.catalog.stores.inmemory import InMemoryCatalogStore


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_healthy_with_catalog(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        components = {c["name"]: c for c in body["components"]}
        assert components["catalog"]["status"] == "healthy"
        assert components["sink"]["message"] == "InMemoryAuditSink"

    def test_degraded_with_empty_catalog(self, app: FastAPI, client: TestClient) -> None:
        app.dependency_overrides[get_catalog_store] = lambda: InMemoryCatalogStore()

        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "degraded"


class TestMetricsEndpoint:
    """Tests for GET /metrics."""

    def test_exposes_audit_counters(self, client: TestClient) -> None:
        client.post(
            "/v1/audit/log",
            json={"event_name": "UserLogin", "attributes": {"userId": "alice"}},
        )

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "auditor_events_emitted_total" in response.text
