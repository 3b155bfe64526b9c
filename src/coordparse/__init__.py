"""
coordparse - recognize, reproject and format coordinates typed as free text.

This package reads a coordinate out of whatever a user types or pastes
(Swiss LV95/LV03, WGS84 decimal or DMS, MGRS), works out which reference
system the numbers are in, reprojects them, and formats coordinates back
into text.
"""

__version__ = "0.1.0"

from coordparse.core.crs.formatter import print_human_readable_coordinates
from coordparse.core.crs.regions import disambiguate
from coordparse.core.crs.transformer import reproject
from coordparse.core.geometry import centroid
from coordparse.core.parsers.registry import coordinate_from_string, recognize_coordinate
from coordparse.models.crs import CoordinatePair, CoordinateSystem, DetectedCoordinate

__all__ = [
    "__version__",
    "CoordinatePair",
    "CoordinateSystem",
    "DetectedCoordinate",
    "centroid",
    "coordinate_from_string",
    "disambiguate",
    "print_human_readable_coordinates",
    "recognize_coordinate",
    "reproject",
]
