"""
Data models and schemas.
"""

from .crs import (
    BoundingRegion,
    CoordinatePair,
    CoordinateSystem,
    DetectedCoordinate,
    ProjectionLike,
    ReferenceSystemDescriptor,
)

__all__ = [
    "BoundingRegion",
    "CoordinatePair",
    "CoordinateSystem",
    "DetectedCoordinate",
    "ProjectionLike",
    "ReferenceSystemDescriptor",
]
