"""
Tests for the coordinates API endpoints.
"""

import re

import pytest
from fastapi.testclient import TestClient

from coordparse.api.main import app
from coordparse.core.config import settings


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(app)


class TestParseEndpoint:
    """Tests for POST /api/v1/coordinates/parse."""

    def test_parse_lv95_to_wgs84(self, client: TestClient) -> None:
        """Test parsing Swiss coordinates into WGS84."""
        response = client.post(
            "/api/v1/coordinates/parse",
            json={"text": "2'600'000 1'200'000", "target": "EPSG:4326", "decimals": 3},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["coordinate"] == [7.439, 46.951]
        assert data["source_system"] == "LV95"
        assert data["target"] == "EPSG:4326"

    def test_parse_target_by_system_id(self, client: TestClient) -> None:
        """Test that a system id is accepted as target."""
        response = client.post(
            "/api/v1/coordinates/parse",
            json={"text": "600000 200000", "target": "lv03", "decimals": 0},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["coordinate"] == [600000.0, 200000.0]
        assert data["target"] == "EPSG:21781"

    def test_parse_default_target(self, client: TestClient) -> None:
        """Test that the configured default target is used."""
        response = client.post("/api/v1/coordinates/parse", json={"text": "46.95 7.44"})

        assert response.status_code == 200
        data = response.json()
        assert data["target"] == settings.default_target_epsg
        assert data["source_system"] == "WGS84"

    def test_parse_dms(self, client: TestClient) -> None:
        """Test parsing degrees, minutes and seconds."""
        response = client.post(
            "/api/v1/coordinates/parse",
            json={"text": "47°5'41.61\"N, 8°4'6.32\"E", "target": "4326", "decimals": 4},
        )

        assert response.status_code == 200
        assert response.json()["coordinate"] == [8.0684, 47.0949]

    def test_parse_unrecognized(self, client: TestClient) -> None:
        """Test that unrecognized text is a parse error."""
        response = client.post("/api/v1/coordinates/parse", json={"text": "32TLT"})

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "PARSE_ERROR"
        assert data["details"]["text"] == "32TLT"
        assert data["suggestions"]

    def test_parse_invalid_target(self, client: TestClient) -> None:
        """Test that an unknown target is a CRS error."""
        response = client.post(
            "/api/v1/coordinates/parse",
            json={"text": "46.95 7.44", "target": "mercator"},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "CRS_ERROR"

    def test_parse_text_too_long(self, client: TestClient) -> None:
        """Test that oversized input fails request validation."""
        response = client.post("/api/v1/coordinates/parse", json={"text": "1" * 300})

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "body.text"


class TestFormatEndpoint:
    """Tests for POST /api/v1/coordinates/format."""

    def test_format_lv95(self, client: TestClient) -> None:
        """Test the default LV95 rendering."""
        response = client.post(
            "/api/v1/coordinates/format",
            json={"coordinate": [2600000, 1200000]},
        )

        assert response.status_code == 200
        assert response.json() == {"text": "2'600'000.0, 1'200'000.0", "system": "LV95"}

    def test_format_wgs84(self, client: TestClient) -> None:
        """Test WGS84 rendering with lowercase system id."""
        response = client.post(
            "/api/v1/coordinates/format",
            json={"coordinate": [7.5, 46.5], "system": "wgs84"},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "46° 30′ N 7° 30′ E (46.50000, 7.50000)"

    def test_format_with_source(self, client: TestClient) -> None:
        """Test that a source projection is reprojected first."""
        response = client.post(
            "/api/v1/coordinates/format",
            json={"coordinate": [7.438632, 46.951083], "system": "LV95", "decimals": 0, "source": "WGS84"},
        )

        assert response.status_code == 200
        assert re.fullmatch(r"2'(599|600)'\d{3}, 1'(199|200)'\d{3}", response.json()["text"])

    def test_format_unknown_system(self, client: TestClient) -> None:
        """Test that an unknown system fails request validation."""
        response = client.post(
            "/api/v1/coordinates/format",
            json={"coordinate": [7.5, 46.5], "system": "GK3"},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_format_utm_out_of_range(self, client: TestClient) -> None:
        """Test that a point outside UTM is a CRS error."""
        response = client.post(
            "/api/v1/coordinates/format",
            json={"coordinate": [0.0, 85.0], "system": "UTM"},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "CRS_ERROR"


class TestCentroidEndpoint:
    """Tests for POST /api/v1/coordinates/centroid."""

    def test_centroid_square(self, client: TestClient) -> None:
        """Test the centroid of a square."""
        response = client.post(
            "/api/v1/coordinates/centroid",
            json={"points": [[0, 0], [4, 0], [4, 4], [0, 4]]},
        )

        assert response.status_code == 200
        assert response.json() == {"centroid": [2.0, 2.0]}

    def test_centroid_single_point(self, client: TestClient) -> None:
        """Test that a single point is a validation error."""
        response = client.post("/api/v1/coordinates/centroid", json={"points": [[1, 1]]})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"]["field"] == "points"

    def test_centroid_collinear(self, client: TestClient) -> None:
        """Test that a degenerate ring is a geometry error."""
        response = client.post(
            "/api/v1/coordinates/centroid",
            json={"points": [[0, 0], [1, 1], [2, 2]]},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "GEOMETRY_ERROR"


class TestSystemsEndpoint:
    """Tests for GET /api/v1/coordinates/systems."""

    def test_list_systems(self, client: TestClient) -> None:
        """Test that all five systems are listed."""
        response = client.get("/api/v1/coordinates/systems")

        assert response.status_code == 200
        data = response.json()
        assert [system["id"] for system in data] == ["LV95", "LV03", "WGS84", "UTM", "MGRS"]
        assert data[0] == {"id": "LV95", "epsg": "EPSG:2056", "label": "CH1903+ / LV95"}
