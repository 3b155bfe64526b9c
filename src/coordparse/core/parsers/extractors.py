"""
Extractors turning a structural pattern match into a coordinate.

Every extractor takes the regex match of its pattern and returns a
DetectedCoordinate (x/longitude first, source system known) or None when
the match is not a usable coordinate after all. Returning None lets the
registry go on with the next pattern.
"""

import logging
import re
from typing import Optional, Tuple

import mgrs
from mgrs.core import MGRSError

from coordparse.core.config import settings
from coordparse.core.crs.regions import disambiguate, is_in_wgs84_bounds
from coordparse.core.crs.utm import get_band_bounds
from coordparse.models.crs import CoordinatePair, CoordinateSystem, DetectedCoordinate
from coordparse.utils.numbers import parse_number

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

# Grid zone designator (2 digits + band letter) and 100km square letters
MGRS_PREFIX_LENGTH = 5

# Lower bound on the length of one degree of latitude
METRES_PER_DEGREE = 110_000.0


def numeric_extractor(match: re.Match[str]) -> Optional[DetectedCoordinate]:
    """
    Extract a plain or thousands-separated number pair.

    The numbers carry no information about their system, so the pair is
    handed to the region disambiguator.

    Args:
        match: Match with groups 'a' and 'b'

    Returns:
        Detected coordinate, or None if a number is malformed or the pair
        lies outside every known region
    """
    a = parse_number(match.group("a"))
    b = parse_number(match.group("b"))
    if a is None or b is None:
        return None
    return disambiguate(a, b)


def _component(match: re.Match[str], index: int) -> Optional[float]:
    groups = match.groupdict()
    degrees = parse_number(groups.get(f"d{index}"))
    minutes = parse_number(groups.get(f"m{index}") or "0")
    seconds = parse_number(groups.get(f"s{index}") or "0")
    if degrees is None or minutes is None or seconds is None:
        return None
    if not (0 <= minutes < 60 and 0 <= seconds < 60):
        return None
    value = abs(degrees) + minutes / 60.0 + seconds / 3600.0
    return -value if degrees < 0 else value


def _apply_cardinal(
    value: float, cardinal: str, lon: Optional[float], lat: Optional[float]
) -> Tuple[Optional[float], Optional[float]]:
    cardinal = cardinal.upper()
    if cardinal == "N":
        lat = value
    elif cardinal == "S":
        lat = -value
    elif cardinal == "E":
        lon = value
    elif cardinal == "W":
        lon = -value
    return lon, lat


def degrees_extractor(match: re.Match[str]) -> Optional[DetectedCoordinate]:
    """
    Extract a geographic coordinate written in degrees.

    Handles degree-only, degree-minute and degree-minute-second notations.
    Each component is converted with deg + min/60 + sec/3600. If any
    cardinal letter is present, the letters decide axis and sign
    (N/S latitude, E/W longitude, S/W negative) and a component without
    letter is dropped. Without letters the text is read as latitude,
    longitude.

    Args:
        match: Match with groups d1/m1/s1/c1 and d2/m2/s2/c2 (minutes,
            seconds and cardinal letters optional)

    Returns:
        WGS84 coordinate as (lon, lat), or None if a component is malformed,
        an axis is missing or the result is out of bounds
    """
    first = _component(match, 1)
    second = _component(match, 2)
    if first is None or second is None:
        return None

    groups = match.groupdict()
    first_cardinal = groups.get("c1") or ""
    second_cardinal = groups.get("c2") or ""

    lon: Optional[float]
    lat: Optional[float]
    if first_cardinal or second_cardinal:
        lon, lat = _apply_cardinal(first, first_cardinal, None, None)
        lon, lat = _apply_cardinal(second, second_cardinal, lon, lat)
    else:
        lat, lon = first, second

    if lon is None or lat is None:
        logger.debug(f"Cardinal letters do not give both axes: {match.group(0)!r}")
        return None
    if not is_in_wgs84_bounds(lon, lat):
        return None
    return DetectedCoordinate(CoordinateSystem.WGS84, CoordinatePair(lon, lat))


def mgrs_extractor(match: re.Match[str]) -> Optional[DetectedCoordinate]:
    """
    Extract a Military Grid Reference System token.

    Spaces are removed and a one-digit zone is zero-padded. Tokens shorter
    than settings.mgrs_min_precision (7: zone, band, 100km square and one
    digit per axis, i.e. 10km) or with an odd number of digits are rejected
    as under-specified. A decoded latitude outside the band named by the
    token is rejected as well; only the south side is widened by one grid
    cell, since the decoded point is the south-west corner of that cell.

    Args:
        match: Match with groups 'zone' and 'digits'

    Returns:
        WGS84 coordinate as (lon, lat), or None if the token is rejected
    """
    zone = int(match.group("zone"))
    if not 1 <= zone <= 60:
        return None

    token = _WHITESPACE.sub("", match.group(0)).upper()
    token = f"{zone:02d}{token[len(match.group('zone')):]}"

    digit_count = len(token) - MGRS_PREFIX_LENGTH
    if len(token) < settings.mgrs_min_precision or digit_count % 2 != 0:
        logger.debug(f"MGRS token {token!r} is under-specified")
        return None

    try:
        lat, lon = mgrs.MGRS().toLatLon(token)
    except (MGRSError, ValueError) as e:
        logger.debug(f"MGRS token {token!r} could not be decoded: {e}")
        return None

    lower, upper = get_band_bounds(token[2])
    cell_degrees = 10 ** (5 - digit_count // 2) / METRES_PER_DEGREE
    if not lower - cell_degrees <= lat <= upper:
        logger.debug(
            f"MGRS token {token!r} decodes to latitude {lat:.4f}, outside band {token[2]}"
        )
        return None

    return DetectedCoordinate(CoordinateSystem.WGS84, CoordinatePair(lon, lat))
