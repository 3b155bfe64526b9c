"""
Data models for coordinate reference system handling.

This module defines the coordinate pair value type, the rectangular
bounding regions used to guess a reference system, and the closed set
of reference systems the parser and formatter know about.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Union


class CoordinatePair(NamedTuple):
    """
    Immutable coordinate pair, always longitude/easting first.

    Attributes:
        x: Longitude or easting
        y: Latitude or northing
    """

    x: float
    y: float


@dataclass(frozen=True)
class BoundingRegion:
    """
    Rectangular numeric range used to guess which CRS a pair belongs to.

    Bounds are exclusive on all four sides.

    Attributes:
        id: Identifier of the reference system this region describes
        x_lower: Lower X bound (or longitude)
        x_upper: Upper X bound (or longitude)
        y_lower: Lower Y bound (or latitude)
        y_upper: Upper Y bound (or latitude)
    """

    id: str
    x_lower: float
    x_upper: float
    y_lower: float
    y_upper: float

    def __post_init__(self) -> None:
        """Validate region bounds."""
        if self.x_lower >= self.x_upper:
            raise ValueError(
                f"x_lower ({self.x_lower}) must be < x_upper ({self.x_upper})"
            )
        if self.y_lower >= self.y_upper:
            raise ValueError(
                f"y_lower ({self.y_lower}) must be < y_upper ({self.y_upper})"
            )

    def contains(self, x: float, y: float) -> bool:
        """
        Check if a point lies strictly inside the region.

        Args:
            x: X coordinate (or longitude)
            y: Y coordinate (or latitude)

        Returns:
            True if point is within bounds
        """
        return self.x_lower < x < self.x_upper and self.y_lower < y < self.y_upper

    def __str__(self) -> str:
        """String representation."""
        return (
            f"Region {self.id}(x: {self.x_lower}..{self.x_upper}, "
            f"y: {self.y_lower}..{self.y_upper})"
        )


@dataclass(frozen=True)
class ReferenceSystemDescriptor:
    """
    Static description of a supported reference system.

    Attributes:
        id: Short identifier (e.g., 'LV95')
        epsg: EPSG identifier of the coordinates this system formats
        label: Human-readable name
        default_decimals: Decimals used when formatting without explicit precision
    """

    id: str
    epsg: str
    label: str
    default_decimals: int

    @property
    def epsg_code(self) -> int:
        """Numeric part of the EPSG identifier."""
        return int(self.epsg.split(":")[1])


class CoordinateSystem(Enum):
    """The reference systems supported for parsing and display."""

    LV95 = ReferenceSystemDescriptor("LV95", "EPSG:2056", "CH1903+ / LV95", 1)
    LV03 = ReferenceSystemDescriptor("LV03", "EPSG:21781", "CH1903 / LV03", 1)
    WGS84 = ReferenceSystemDescriptor("WGS84", "EPSG:4326", "WGS84", 2)
    # UTM and MGRS are rendered from WGS84 longitude/latitude
    UTM = ReferenceSystemDescriptor("UTM", "EPSG:4326", "UTM", 0)
    MGRS = ReferenceSystemDescriptor("MGRS", "EPSG:4326", "MGRS", 5)

    @property
    def epsg(self) -> str:
        """EPSG identifier of the system."""
        return self.value.epsg

    @property
    def label(self) -> str:
        """Human-readable name of the system."""
        return self.value.label

    def format(self, coordinate: CoordinatePair, decimals: Optional[int] = None) -> str:
        """
        Render a coordinate expressed in this system as text.

        Args:
            coordinate: Coordinate in this system's EPSG
            decimals: Precision, defaults to the system's own default

        Returns:
            Human-readable coordinate string
        """
        from coordparse.core.crs.formatter import format_coordinate

        return format_coordinate(coordinate, self, decimals)

    @classmethod
    def from_id(cls, system_id: str) -> "CoordinateSystem":
        """
        Look up a system by its identifier, case-insensitively.

        Args:
            system_id: Identifier such as 'lv95' or 'MGRS'

        Returns:
            Matching CoordinateSystem

        Raises:
            ValueError: If no system has this identifier
        """
        try:
            return cls[system_id.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown coordinate system: {system_id}")

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "id": self.value.id,
            "epsg": self.value.epsg,
            "label": self.value.label,
        }


# Anything that can name a projection: a known system, "EPSG:xxxx" or a bare code
ProjectionLike = Union[CoordinateSystem, str, int]


@dataclass(frozen=True)
class DetectedCoordinate:
    """
    A coordinate pair whose source reference system has been identified.

    Attributes:
        system: Reference system the pair is expressed in
        coordinate: The pair in that system, x/longitude first
    """

    system: CoordinateSystem
    coordinate: CoordinatePair

    def __str__(self) -> str:
        """String representation."""
        return f"{self.coordinate} [{self.system.epsg}]"
