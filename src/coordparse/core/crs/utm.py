"""
UTM zone detection and utilities.

This module finds the UTM (Universal Transverse Mercator) zone and
latitude band for WGS84 coordinates and converts them to easting and
northing.
"""

from typing import NamedTuple, Tuple

from coordparse.core.crs.transformer import CoordinateTransformer
from coordparse.models.crs import CoordinatePair, CoordinateSystem

# 8 degree latitude bands from 80S, I and O omitted
BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"


class UTMCoordinate(NamedTuple):
    """Easting/northing in metres together with the zone designator."""

    easting: float
    northing: float
    zone_number: int
    zone_letter: str

    @property
    def zone(self) -> str:
        """Zone designator such as '32T'."""
        return f"{self.zone_number}{self.zone_letter}"


def detect_utm_zone(longitude: float, latitude: float) -> Tuple[int, bool]:
    """
    Detect the appropriate UTM zone for given WGS84 coordinates.

    UTM zones are numbered from 1 to 60, each covering 6 degrees of longitude.
    Zone 1 starts at 180°W. The hemisphere (north/south) is determined by latitude.

    Special cases:
    - Norway: Uses zone 32V instead of 31V for some areas
    - Svalbard: Uses zones 31X, 33X, 35X and 37X instead of 32X, 34X and 36X

    Args:
        longitude: Longitude in decimal degrees (-180 to 180)
        latitude: Latitude in decimal degrees (-90 to 90)

    Returns:
        Tuple of (zone_number, is_northern_hemisphere)

    Raises:
        ValueError: If coordinates are out of valid range
    """
    if not -180 <= longitude <= 180:
        raise ValueError(f"Longitude must be between -180 and 180, got {longitude}")
    if not -90 <= latitude <= 90:
        raise ValueError(f"Latitude must be between -90 and 90, got {latitude}")

    is_northern = latitude >= 0

    zone_number = int((longitude + 180) / 6) + 1

    # 180° longitude belongs to zone 1
    if zone_number > 60:
        zone_number = 1

    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        zone_number = 32

    if 72.0 <= latitude < 84.0:
        if 0.0 <= longitude < 9.0:
            zone_number = 31
        elif 9.0 <= longitude < 21.0:
            zone_number = 33
        elif 21.0 <= longitude < 33.0:
            zone_number = 35
        elif 33.0 <= longitude < 42.0:
            zone_number = 37

    return zone_number, is_northern


def get_utm_epsg(zone_number: int, is_northern: bool) -> int:
    """
    Get EPSG code for a WGS84 UTM zone.

    Args:
        zone_number: UTM zone number (1-60)
        is_northern: True for northern hemisphere, False for southern

    Returns:
        EPSG code (32601-32660 north, 32701-32760 south)

    Raises:
        ValueError: If zone_number is out of valid range
    """
    if not 1 <= zone_number <= 60:
        raise ValueError(f"UTM zone must be between 1 and 60, got {zone_number}")

    return (32600 if is_northern else 32700) + zone_number


def get_utm_letter_designator(latitude: float) -> str:
    """
    Get the UTM latitude band letter designator.

    Bands are 8 degrees high, lettered C to X (omitting I and O); band X
    covers 72°N to 84°N.

    Args:
        latitude: Latitude in decimal degrees (-80 to 84)

    Returns:
        Letter designator (C-X)

    Raises:
        ValueError: If latitude is out of UTM range
    """
    if latitude < -80 or latitude > 84:
        raise ValueError(f"UTM is only defined between 80°S and 84°N, got {latitude}")

    if latitude >= 72:
        return "X"

    return BAND_LETTERS[int((latitude + 80) / 8)]


def get_band_bounds(letter: str) -> Tuple[float, float]:
    """
    Get the latitude range covered by a UTM band letter.

    Args:
        letter: Band letter (C-X, case-insensitive)

    Returns:
        Tuple of (lower, upper) latitude in decimal degrees

    Raises:
        ValueError: If the letter is not a band letter

    Example:
        >>> get_band_bounds("T")
        (40.0, 48.0)
    """
    index = BAND_LETTERS.find(letter.upper()) if len(letter) == 1 else -1
    if index < 0:
        raise ValueError(f"Not a UTM band letter: {letter!r}")

    lower = -80.0 + 8.0 * index
    upper = 84.0 if letter.upper() == "X" else lower + 8.0
    return lower, upper


def wgs84_to_utm(longitude: float, latitude: float) -> UTMCoordinate:
    """
    Convert WGS84 coordinates to UTM in their natural zone.

    Args:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees (-80 to 84)

    Returns:
        UTMCoordinate with easting, northing and zone designator

    Raises:
        ValueError: If the point is outside the UTM latitude range
        TransformationError: If the projection fails
    """
    zone_letter = get_utm_letter_designator(latitude)
    zone_number, is_northern = detect_utm_zone(longitude, latitude)
    epsg = get_utm_epsg(zone_number, is_northern)

    transformer = CoordinateTransformer(CoordinateSystem.WGS84, epsg)
    easting, northing = transformer.transform(CoordinatePair(longitude, latitude))

    return UTMCoordinate(easting, northing, zone_number, zone_letter)
