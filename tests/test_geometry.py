"""
Tests for polygon centroid computation.
"""

import pytest

from coordparse.core.errors import GeometryError
from coordparse.core.geometry import centroid
from coordparse.models.crs import CoordinatePair


class TestCentroid:
    """Tests for centroid."""

    def test_square(self) -> None:
        """Test the centroid of an open square ring."""
        assert centroid((0, 0), (4, 0), (4, 4), (0, 4)) == CoordinatePair(2.0, 2.0)

    def test_closed_ring(self) -> None:
        """Test that an explicitly closed ring gives the same result."""
        assert centroid((0, 0), (4, 0), (4, 4), (0, 4), (0, 0)) == CoordinatePair(2.0, 2.0)

    def test_clockwise_ring(self) -> None:
        """Test that winding order does not matter."""
        assert centroid((0, 4), (4, 4), (4, 0), (0, 0)) == CoordinatePair(2.0, 2.0)

    def test_triangle(self) -> None:
        """Test that a triangle centroid is the mean of its vertices."""
        result = centroid((0, 0), (6, 0), (0, 3))

        assert result.x == pytest.approx(2.0)
        assert result.y == pytest.approx(1.0)

    def test_l_shape_is_area_weighted(self) -> None:
        """Test that the centroid is area-weighted, not the vertex mean."""
        result = centroid((0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2))

        assert result.x == pytest.approx(5 / 6)
        assert result.y == pytest.approx(5 / 6)

    def test_swiss_coordinates(self) -> None:
        """Test a rectangle in LV95 magnitudes."""
        result = centroid(
            (2600000, 1200000), (2600100, 1200000), (2600100, 1200050), (2600000, 1200050)
        )

        assert result.x == pytest.approx(2600050.0)
        assert result.y == pytest.approx(1200025.0)

    def test_returns_coordinate_pair(self) -> None:
        """Test the result type."""
        result = centroid((0, 0), (1, 0), (0, 1))
        assert isinstance(result, CoordinatePair)
        assert isinstance(result.x, float)

    def test_too_few_points(self) -> None:
        """Test that fewer than two points give None."""
        assert centroid() is None
        assert centroid((1, 1)) is None

    def test_two_points_have_no_area(self) -> None:
        """Test that a two-point ring is degenerate."""
        with pytest.raises(GeometryError):
            centroid((0, 0), (1, 1))

    def test_collinear_points(self) -> None:
        """Test that collinear points raise GeometryError."""
        with pytest.raises(GeometryError) as exc_info:
            centroid((0, 0), (1, 1), (2, 2))

        assert exc_info.value.details["geometry_type"] == "Polygon"
        assert exc_info.value.status_code == 422

    def test_malformed_points(self) -> None:
        """Test that points which are not pairs raise GeometryError."""
        with pytest.raises(GeometryError):
            centroid((0, 0, 0), (1, 0, 0), (0, 1, 0))

    def test_collinear_swiss_coordinates(self) -> None:
        """Test that collinear points at LV95 magnitudes raise GeometryError."""
        with pytest.raises(GeometryError):
            centroid(
                (2600000.1, 1200000.1),
                (2600000.2, 1200000.2),
                (2600000.7, 1200000.7),
                (2600001.3, 1200001.3),
            )

    def test_repeated_points(self) -> None:
        """Test that a ring of one repeated point raises GeometryError."""
        with pytest.raises(GeometryError):
            centroid((5, 5), (5, 5), (5, 5))

    def test_small_triangle(self) -> None:
        """Test a centimetre-sized triangle in degrees."""
        result = centroid((1e-7, 0), (2e-7, 0), (2e-7, 1e-7))

        assert result.x == pytest.approx(5e-7 / 3)
        assert result.y == pytest.approx(1e-7 / 3)

    def test_small_swiss_triangle(self) -> None:
        """Test that a small triangle at LV95 magnitudes stays in place."""
        result = centroid((2600000.0, 1200000.0), (2600003.0, 1200000.0), (2600000.0, 1200003.0))

        assert result.x == pytest.approx(2600001.0, abs=1e-6)
        assert result.y == pytest.approx(1200001.0, abs=1e-6)
