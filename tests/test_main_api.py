"""
Tests for main API endpoints and application lifecycle.
"""

import pytest
from fastapi.testclient import TestClient

from coordparse import __version__
from coordparse.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(app)


class TestMainEndpoints:
    """Tests for main API endpoints."""

    def test_root_endpoint(self, client: TestClient) -> None:
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()

        assert data["name"] == "coordparse API"
        assert data["version"] == __version__
        assert data["description"] == "Coordinate recognition and formatting"

    def test_health_check(self, client: TestClient) -> None:
        """Test health check endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_openapi_schema(self, client: TestClient) -> None:
        """Test that the coordinate routes are documented."""
        response = client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/v1/coordinates/parse" in paths
        assert "/api/v1/coordinates/systems" in paths


class TestRequestCorrelation:
    """Tests for the request ID middleware."""

    def test_request_id_generated(self, client: TestClient) -> None:
        """Test that a request ID is added to responses."""
        response = client.get("/health")
        assert response.headers.get("X-Request-ID")

    def test_request_id_propagated(self, client: TestClient) -> None:
        """Test that a caller's request ID is echoed back."""
        response = client.get("/health", headers={"X-Request-ID": "test-123"})
        assert response.headers["X-Request-ID"] == "test-123"

    def test_request_id_in_error_body(self, client: TestClient) -> None:
        """Test that error responses carry the request ID."""
        response = client.post(
            "/api/v1/coordinates/parse",
            json={"text": "Bern"},
            headers={"X-Request-ID": "test-456"},
        )

        assert response.status_code == 422
        assert response.json()["request_id"] == "test-456"


class TestLifespan:
    """Tests for application startup."""

    def test_startup_configures_logging(self) -> None:
        """Test that the app starts and serves inside its lifespan."""
        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
