"""Tests for the /health endpoint."""

from fastapi.testclient import TestClient


def test_health_returns_ok(client: TestClient) -> None:
    """GET /health should return 200 with status 'ok'."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health_reports_enabled_modules(client: TestClient) -> None:
    """GET /health response must count the viewpoint rig module."""
    data = client.get("/health").json()
    assert data["modules"] == 1
