"""Tests for health endpoint."""

from fastapi.testclient import TestClient

from launchguard.api.app import create_app
from launchguard.core.dependencies import LaunchGuard


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_endpoint_returns_ok(self, client: TestClient) -> None:
        """
        Given: The application is running
        When: GET /health is called
        Then: Returns 200 with status and version
        """
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"
        assert data["known_bots"] == 0

    def test_health_counts_known_bots(self, client: TestClient, guard: LaunchGuard) -> None:
        guard.detector.add_known_bot("bot_a")

        assert client.get("/health").json()["known_bots"] == 1

    def test_lifespan_runs(self, guard: LaunchGuard) -> None:
        """Startup and shutdown complete with the app used as a context manager."""
        with TestClient(create_app(guard)) as client:
            assert client.get("/health").status_code == 200
