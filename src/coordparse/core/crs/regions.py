"""
Bounding-region catalog and reference system disambiguation.

Plain numeric input such as "2600000 1200000" or "46.95 7.44" does not say
which reference system it is in. The regions below are rough extents of
each supported system, used only to guess the system from the magnitude of
the numbers; they play no part in the projection math.
"""

import logging
from typing import Optional, Tuple

from coordparse.models.crs import (
    BoundingRegion,
    CoordinatePair,
    CoordinateSystem,
    DetectedCoordinate,
)

logger = logging.getLogger(__name__)

LV95_REGION = BoundingRegion(
    id="LV95",
    x_lower=2485071.58,
    x_upper=2828515.82,
    y_lower=1075346.31,
    y_upper=1299941.79,
)

LV03_REGION = BoundingRegion(
    id="LV03",
    x_lower=485071.54,
    x_upper=828515.78,
    y_lower=75346.36,
    y_upper=299941.84,
)

# Polar latitudes are left out, Web Mercator cannot display them anyway
WGS84_REGION = BoundingRegion(
    id="WGS84",
    x_lower=-180.0,
    x_upper=180.0,
    y_lower=-89.0,
    y_upper=89.0,
)

# Metric Swiss systems first: their magnitudes are large and distinctive.
# WGS84 is the most permissive region and must stay last.
METRIC_REGIONS: Tuple[Tuple[BoundingRegion, CoordinateSystem], ...] = (
    (LV95_REGION, CoordinateSystem.LV95),
    (LV03_REGION, CoordinateSystem.LV03),
)


def disambiguate(a: float, b: float) -> Optional[DetectedCoordinate]:
    """
    Guess the reference system of a raw number pair.

    Regions are tried in a fixed priority order and the first one that
    accepts the pair wins:

    1. LV95 as (a, b), then as (b, a)
    2. LV03 as (a, b), then as (b, a)
    3. WGS84 with (a, b) read as (lat, lon), then as (lon, lat)

    For "46.95 7.44" step 3 yields (7.44, 46.95); for "151.21 -33.87",
    where 151.21 cannot be a latitude, it yields (151.21, -33.87).

    Users type Swiss coordinates in either order, and geographic
    coordinates conventionally as latitude first; the returned pair is
    always x/longitude first.

    Args:
        a: First number as typed
        b: Second number as typed

    Returns:
        The detected system and reordered pair, or None if the numbers lie
        outside every known region
    """
    for region, system in METRIC_REGIONS:
        if region.contains(a, b):
            return DetectedCoordinate(system, CoordinatePair(a, b))
        if region.contains(b, a):
            return DetectedCoordinate(system, CoordinatePair(b, a))

    # The region is tested on the pair that is returned, so a latitude
    # can never come out above 89 degrees
    if WGS84_REGION.contains(b, a):
        return DetectedCoordinate(CoordinateSystem.WGS84, CoordinatePair(b, a))
    if WGS84_REGION.contains(a, b):
        return DetectedCoordinate(CoordinateSystem.WGS84, CoordinatePair(a, b))

    logger.debug(f"Unknown coordinate type [{a}, {b}]")
    return None


def is_in_wgs84_bounds(longitude: float, latitude: float) -> bool:
    """
    Check if a longitude/latitude pair lies inside the WGS84 region.

    Args:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees

    Returns:
        True if the pair is within bounds
    """
    return WGS84_REGION.contains(longitude, latitude)
