"""
Human-readable rendering of coordinates for each supported system.
"""

import logging
import math
from typing import Callable, Dict, Optional

import mgrs
from mgrs.core import MGRSError

from coordparse.core.crs.transformer import reproject
from coordparse.core.crs.utm import wgs84_to_utm
from coordparse.core.errors import CRSError
from coordparse.models.crs import CoordinatePair, CoordinateSystem, ProjectionLike
from coordparse.utils.numbers import format_thousands, round_half_away

logger = logging.getLogger(__name__)


def to_string_ch(coordinate: CoordinatePair, decimals: int) -> str:
    """
    Format a Swiss metric coordinate, e.g. "2'600'000.0, 1'200'000.0".

    Args:
        coordinate: Easting/northing in LV95 or LV03
        decimals: Fixed number of decimals per axis

    Returns:
        Both axes with apostrophe thousands separators, comma-joined
    """
    return ", ".join(
        format_thousands(f"{round_half_away(value, decimals):.{decimals}f}")
        for value in coordinate
    )


def _pad_number(value: float, width: int, decimals: int) -> str:
    total = width + (decimals + 1 if decimals else 0)
    return f"{value:0{total}.{decimals}f}"


def degrees_to_hdms(hemispheres: str, degrees: float, decimals: int) -> str:
    """
    Format an angle as degrees, minutes and seconds with hemisphere letter.

    Minutes and seconds are left out when they are zero, and the hemisphere
    when the angle is exactly zero.

    Args:
        hemispheres: Letters for positive and negative values, 'NS' or 'EW'
        degrees: Angle in decimal degrees
        decimals: Decimals kept on the seconds

    Returns:
        Text such as "47° 05′ 41.61″ N"
    """
    normalized = ((degrees + 180) % 360) - 180
    total_seconds = abs(3600 * normalized)
    deg = math.floor(total_seconds / 3600)
    minutes = math.floor((total_seconds - deg * 3600) / 60)
    seconds = round_half_away(total_seconds - deg * 3600 - minutes * 60, decimals)

    if seconds >= 60:
        seconds = 0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        deg += 1

    hdms = f"{deg}°"
    if minutes != 0 or seconds != 0:
        hdms += f" {minutes:02d}′"
    if seconds != 0:
        hdms += f" {_pad_number(seconds, 2, decimals)}″"
    if normalized != 0:
        hdms += " " + hemispheres[1 if normalized < 0 else 0]
    return hdms


def _format_swiss(coordinate: CoordinatePair, decimals: int) -> str:
    return to_string_ch(coordinate, decimals)


def _format_wgs84(coordinate: CoordinatePair, decimals: int) -> str:
    lon, lat = coordinate
    hdms = f"{degrees_to_hdms('NS', lat, decimals)} {degrees_to_hdms('EW', lon, decimals)}"
    plain_decimals = decimals + 3
    return f"{hdms} ({lat:.{plain_decimals}f}, {lon:.{plain_decimals}f})"


def _format_utm(coordinate: CoordinatePair, decimals: int) -> str:
    try:
        utm = wgs84_to_utm(coordinate.x, coordinate.y)
    except ValueError as e:
        raise CRSError(str(e), target_crs="UTM")

    if decimals == 0:
        easting, northing = str(math.trunc(utm.easting)), str(math.trunc(utm.northing))
    else:
        easting = f"{round_half_away(utm.easting, decimals):.{decimals}f}"
        northing = f"{round_half_away(utm.northing, decimals):.{decimals}f}"

    return f"{format_thousands(easting)} {format_thousands(northing)} ({utm.zone})"


def _format_mgrs(coordinate: CoordinatePair, decimals: int) -> str:
    precision = max(0, min(decimals, 5))
    try:
        grid = mgrs.MGRS().toMGRS(coordinate.y, coordinate.x, MGRSPrecision=precision)
    except MGRSError as e:
        raise CRSError(f"Cannot express coordinate as MGRS: {e}", target_crs="MGRS") from e

    # Zone and 100km square, then easting and northing digits
    square_end = len(grid) - 2 * precision
    parts = [grid[:square_end], grid[square_end:square_end + precision], grid[square_end + precision:]]
    return " ".join(part for part in parts if part)


_FORMATTERS: Dict[CoordinateSystem, Callable[[CoordinatePair, int], str]] = {
    CoordinateSystem.LV95: _format_swiss,
    CoordinateSystem.LV03: _format_swiss,
    CoordinateSystem.WGS84: _format_wgs84,
    CoordinateSystem.UTM: _format_utm,
    CoordinateSystem.MGRS: _format_mgrs,
}


def format_coordinate(
    coordinate: CoordinatePair,
    system: CoordinateSystem,
    decimals: Optional[int] = None,
) -> str:
    """
    Render a coordinate already expressed in the system's EPSG.

    Args:
        coordinate: Pair in system.epsg, x/longitude first
        system: Reference system used for display
        decimals: Precision, defaults to the system's own default

    Returns:
        Formatted coordinate text

    Raises:
        CRSError: If the coordinate cannot be shown in this system
    """
    if decimals is None:
        decimals = system.value.default_decimals
    return _FORMATTERS[system](CoordinatePair(*coordinate), decimals)


def print_human_readable_coordinates(
    coordinate: CoordinatePair,
    system: CoordinateSystem = CoordinateSystem.LV95,
    decimals: Optional[int] = None,
    source: Optional[ProjectionLike] = None,
) -> str:
    """
    Render a coordinate as text for display.

    Examples:
        LV95:  "2'600'000.0, 1'200'000.0"
        WGS84: "46° 30′ N 7° 30′ E (46.50000, 7.50000)"
        UTM:   "421'184 5'214'315 (32T)"
        MGRS:  "32TLT 98757 23913"

    Args:
        coordinate: Pair to render, x/longitude first
        system: Reference system used for display
        decimals: Precision, defaults to the system's own default
        source: Projection the coordinate is in; when given it is first
            reprojected to the system's EPSG, otherwise it must already be
            expressed in it

    Returns:
        Formatted coordinate text

    Raises:
        CRSError: If reprojection fails or the system cannot show the point
    """
    if source is not None:
        coordinate = reproject(coordinate, source, system)
    return system.format(coordinate, decimals)
