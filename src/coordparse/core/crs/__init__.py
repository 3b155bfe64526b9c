"""
Coordinate Reference System (CRS) handling.

This module provides:
- The bounding-region catalog and system disambiguation for raw number pairs
- Reprojection between systems via pyproj
- UTM zone utilities
- Human-readable formatting for each supported system
"""

from coordparse.core.crs.formatter import (
    degrees_to_hdms,
    format_coordinate,
    print_human_readable_coordinates,
    to_string_ch,
)
from coordparse.core.crs.regions import (
    LV03_REGION,
    LV95_REGION,
    WGS84_REGION,
    disambiguate,
    is_in_wgs84_bounds,
)
from coordparse.core.crs.transformer import (
    CoordinateTransformer,
    reproject,
    resolve_epsg,
)
from coordparse.core.crs.utm import (
    UTMCoordinate,
    detect_utm_zone,
    get_utm_epsg,
    get_utm_letter_designator,
    wgs84_to_utm,
)

__all__ = [
    # Formatter
    "degrees_to_hdms",
    "format_coordinate",
    "print_human_readable_coordinates",
    "to_string_ch",
    # Regions
    "LV03_REGION",
    "LV95_REGION",
    "WGS84_REGION",
    "disambiguate",
    "is_in_wgs84_bounds",
    # Transformer
    "CoordinateTransformer",
    "reproject",
    "resolve_epsg",
    # UTM utilities
    "UTMCoordinate",
    "detect_utm_zone",
    "get_utm_epsg",
    "get_utm_letter_designator",
    "wgs84_to_utm",
]
