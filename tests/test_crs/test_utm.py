"""
Tests for UTM zone detection and utilities.
"""

import pytest

from coordparse.core.crs import utm


class TestUTMZoneDetection:
    """Tests for UTM zone detection."""

    def test_detect_utm_zone_bern(self) -> None:
        """Test UTM zone detection for Bern, Switzerland."""
        # Bern: 46.9480°N, 7.4474°E
        zone, is_northern = utm.detect_utm_zone(7.4474, 46.9480)
        assert zone == 32
        assert is_northern is True

    def test_detect_utm_zone_london(self) -> None:
        """Test UTM zone detection for London, UK."""
        zone, is_northern = utm.detect_utm_zone(-0.1278, 51.5074)
        assert zone == 30
        assert is_northern is True

    def test_detect_utm_zone_sydney(self) -> None:
        """Test UTM zone detection for Sydney, Australia."""
        zone, is_northern = utm.detect_utm_zone(151.2093, -33.8688)
        assert zone == 56
        assert is_northern is False

    def test_detect_utm_zone_equator(self) -> None:
        """Test UTM zone detection at equator."""
        zone, is_northern = utm.detect_utm_zone(0.0, 0.0)
        assert zone == 31
        assert is_northern is True  # 0° latitude is northern

    def test_detect_utm_zone_antimeridian(self) -> None:
        """Test that 180° longitude falls into zone 1."""
        zone, _ = utm.detect_utm_zone(180.0, 10.0)
        assert zone == 1

    def test_detect_utm_zone_norway_special_case(self) -> None:
        """Test special case handling for Norway."""
        zone, _ = utm.detect_utm_zone(6.0, 60.0)
        assert zone == 32

    def test_detect_utm_zone_svalbard_special_case(self) -> None:
        """Test special case handling for Svalbard."""
        assert utm.detect_utm_zone(5.0, 78.0)[0] == 31
        assert utm.detect_utm_zone(15.0, 78.0)[0] == 33
        assert utm.detect_utm_zone(25.0, 78.0)[0] == 35
        assert utm.detect_utm_zone(35.0, 78.0)[0] == 37

    def test_detect_utm_zone_invalid_longitude(self) -> None:
        """Test error handling for invalid longitude."""
        with pytest.raises(ValueError, match="Longitude must be between"):
            utm.detect_utm_zone(181.0, 0.0)

    def test_detect_utm_zone_invalid_latitude(self) -> None:
        """Test error handling for invalid latitude."""
        with pytest.raises(ValueError, match="Latitude must be between"):
            utm.detect_utm_zone(0.0, -91.0)


class TestUTMEPSG:
    """Tests for UTM EPSG code generation."""

    def test_get_utm_epsg_north(self) -> None:
        """Test EPSG code for a northern zone."""
        assert utm.get_utm_epsg(32, True) == 32632

    def test_get_utm_epsg_south(self) -> None:
        """Test EPSG code for a southern zone."""
        assert utm.get_utm_epsg(56, False) == 32756

    def test_get_utm_epsg_invalid_zone(self) -> None:
        """Test error handling for zones outside 1-60."""
        with pytest.raises(ValueError, match="UTM zone must be between"):
            utm.get_utm_epsg(0, True)
        with pytest.raises(ValueError, match="UTM zone must be between"):
            utm.get_utm_epsg(61, True)


class TestUTMLetterDesignator:
    """Tests for UTM latitude bands."""

    @pytest.mark.parametrize(
        "latitude,letter",
        [(-80.0, "C"), (-1.0, "M"), (0.0, "N"), (46.5, "T"), (71.9, "W"), (72.0, "X"), (84.0, "X")],
    )
    def test_band_letters(self, latitude: float, letter: str) -> None:
        """Test band letters across the UTM latitude range."""
        assert utm.get_utm_letter_designator(latitude) == letter

    def test_out_of_range(self) -> None:
        """Test that polar latitudes have no band."""
        with pytest.raises(ValueError, match="UTM is only defined"):
            utm.get_utm_letter_designator(85.0)
        with pytest.raises(ValueError, match="UTM is only defined"):
            utm.get_utm_letter_designator(-80.5)

    @pytest.mark.parametrize(
        "letter,bounds",
        [("C", (-80.0, -72.0)), ("n", (0.0, 8.0)), ("T", (40.0, 48.0)), ("X", (72.0, 84.0))],
    )
    def test_band_bounds(self, letter: str, bounds: tuple) -> None:
        """Test the latitude range of a band letter."""
        assert utm.get_band_bounds(letter) == bounds

    @pytest.mark.parametrize("letter", ["I", "O", "A", "Z", "TT", ""])
    def test_band_bounds_invalid(self, letter: str) -> None:
        """Test that non-band letters are rejected."""
        with pytest.raises(ValueError, match="Not a UTM band letter"):
            utm.get_band_bounds(letter)


class TestWGS84ToUTM:
    """Tests for WGS84 to UTM conversion."""

    def test_central_meridian(self) -> None:
        """Test that a point on the central meridian has easting 500000."""
        result = utm.wgs84_to_utm(9.0, 47.0)
        assert result.zone == "32T"
        assert result.easting == pytest.approx(500000.0, abs=0.01)
        assert result.northing == pytest.approx(5205164.0, abs=50.0)

    def test_southern_hemisphere_false_northing(self) -> None:
        """Test that southern points use the 10,000 km false northing."""
        result = utm.wgs84_to_utm(151.2093, -33.8688)
        assert result.zone_number == 56
        assert result.zone_letter == "H"
        assert 6_000_000 < result.northing < 7_000_000

    def test_outside_utm_range(self) -> None:
        """Test that polar points are rejected."""
        with pytest.raises(ValueError):
            utm.wgs84_to_utm(0.0, 86.0)
