"""
Polygon centroid computation.
"""

import logging
import math
from typing import Optional, Sequence

from shapely.geometry import Polygon

from coordparse.core.errors import GeometryError
from coordparse.models.crs import CoordinatePair

logger = logging.getLogger(__name__)

# Area below this fraction of extent * magnitude is rounding noise
AREA_TOLERANCE = 1e-12


def centroid(*points: Sequence[float]) -> Optional[CoordinatePair]:
    """
    Compute the area-weighted centroid of a polygon ring.

    An open ring is closed by shapely. The ring is shifted so that its first
    vertex is the origin before the polygon is built, and the offset is added
    back to the result. Projected coordinates such as LV95 keep their full
    precision that way.

    A ring counts as degenerate when its area is not above
    ``AREA_TOLERANCE * extent * magnitude``, where extent is the larger side
    of its bounding box and magnitude the largest absolute coordinate. The
    area left by rounding scales with both.

    Args:
        *points: Ring vertices as (x, y) pairs

    Returns:
        Centroid, or None if fewer than 2 points are given

    Raises:
        GeometryError: If the points are not pairs or the ring has no area
            (collinear or repeated points)

    Example:
        >>> centroid((0, 0), (4, 0), (4, 4), (0, 4))
        CoordinatePair(x=2.0, y=2.0)
    """
    if len(points) < 2:
        return None

    if any(len(point) != 2 for point in points):
        raise GeometryError(
            "Centroid points must be (x, y) pairs",
            geometry_type="Polygon",
            details={"point_count": len(points)},
        )

    origin_x, origin_y = float(points[0][0]), float(points[0][1])
    shifted = [(float(x) - origin_x, float(y) - origin_y) for x, y in points]

    try:
        polygon = Polygon(shifted)
    except ValueError as e:
        raise GeometryError(
            f"Cannot build a polygon from {len(points)} points: {e}",
            geometry_type="Polygon",
            details={"point_count": len(points)},
        ) from e

    min_x, min_y, max_x, max_y = polygon.bounds
    extent = max(max_x - min_x, max_y - min_y)
    magnitude = max(abs(origin_x), abs(origin_y), extent)
    area = polygon.area

    if not math.isfinite(area) or area <= AREA_TOLERANCE * extent * magnitude:
        logger.debug(f"Degenerate ring of {len(points)} points, area {area}")
        raise GeometryError(
            "Cannot compute the centroid of a polygon with zero area",
            geometry_type="Polygon",
            details={"point_count": len(points)},
        )

    center = polygon.centroid
    if center.is_empty:
        raise GeometryError(
            "Polygon centroid is empty",
            geometry_type="Polygon",
            details={"point_count": len(points)},
        )

    return CoordinatePair(center.x + origin_x, center.y + origin_y)
