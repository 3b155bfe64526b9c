"""
Coordinate transformation service.

This module wraps pyproj for the reprojection step of the parser and the
formatter. It contains no business logic besides resolving which EPSG
identifier to hand to pyproj and rounding the result.
"""

import logging
import math
from typing import Optional

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError as PyprojCRSError
from pyproj.exceptions import ProjError

from coordparse.core.errors import CRSError, TransformationError
from coordparse.models.crs import CoordinatePair, CoordinateSystem, ProjectionLike
from coordparse.utils.numbers import round_half_away

logger = logging.getLogger(__name__)


def resolve_epsg(projection: ProjectionLike) -> str:
    """
    Normalize anything naming a projection to an "EPSG:xxxx" identifier.

    Args:
        projection: CoordinateSystem, "EPSG:2056", "epsg:2056", "2056" or 2056

    Returns:
        Upper-case EPSG identifier

    Raises:
        CRSError: If the value is not an EPSG reference
    """
    if isinstance(projection, CoordinateSystem):
        return projection.epsg
    if isinstance(projection, int) and not isinstance(projection, bool):
        return f"EPSG:{projection}"
    if isinstance(projection, str):
        text = projection.strip().upper()
        if text.isdigit():
            return f"EPSG:{text}"
        if text.startswith("EPSG:") and text[5:].isdigit():
            return text
    raise CRSError(f"Not an EPSG projection identifier: {projection!r}")


class CoordinateTransformer:
    """
    Transforms coordinate pairs from one projection to another.

    Axis order is always x/longitude first, regardless of the authority
    definition of either CRS.
    """

    def __init__(self, source: ProjectionLike, target: ProjectionLike):
        """
        Initialize transformer.

        Args:
            source: Projection the input coordinates are in
            target: Projection to transform to

        Raises:
            CRSError: If either projection is not an EPSG identifier
            TransformationError: If pyproj cannot build the transformation
        """
        self.source_epsg = resolve_epsg(source)
        self.target_epsg = resolve_epsg(target)

        try:
            self.transformer = Transformer.from_crs(
                CRS.from_user_input(self.source_epsg),
                CRS.from_user_input(self.target_epsg),
                always_xy=True,
            )
        except (PyprojCRSError, ProjError) as e:
            raise TransformationError(
                f"Failed to create transformer: {e}",
                source_crs=self.source_epsg,
                target_crs=self.target_epsg,
            )

    def transform(self, coordinate: CoordinatePair) -> CoordinatePair:
        """
        Transform a single coordinate pair.

        Args:
            coordinate: Pair in the source projection

        Returns:
            Pair in the target projection

        Raises:
            TransformationError: If pyproj fails or yields a non-finite result
        """
        try:
            x, y = self.transformer.transform(coordinate[0], coordinate[1], errcheck=True)
        except ProjError as e:
            raise TransformationError(
                f"Transformation failed: {e}",
                source_crs=self.source_epsg,
                target_crs=self.target_epsg,
                details={"coordinate": list(coordinate)},
            )

        if not (math.isfinite(x) and math.isfinite(y)):
            raise TransformationError(
                "Transformation produced a non-finite coordinate",
                source_crs=self.source_epsg,
                target_crs=self.target_epsg,
                details={"coordinate": list(coordinate)},
            )
        return CoordinatePair(x, y)

    def __repr__(self) -> str:
        """String representation."""
        return f"CoordinateTransformer({self.source_epsg} -> {self.target_epsg})"


def reproject(
    coordinate: CoordinatePair,
    source: ProjectionLike,
    target: ProjectionLike,
    decimals: Optional[int] = None,
) -> CoordinatePair:
    """
    Reproject a coordinate pair and optionally round it.

    Args:
        coordinate: Pair in the source projection, x/longitude first
        source: Projection of the input
        target: Projection wanted for the output
        decimals: Round each axis half away from zero to this many decimals

    Returns:
        Reprojected (and rounded) coordinate pair

    Raises:
        CRSError: If a projection is not an EPSG identifier
        TransformationError: If the transformation fails
    """
    source_epsg = resolve_epsg(source)
    target_epsg = resolve_epsg(target)

    if source_epsg == target_epsg:
        result = CoordinatePair(float(coordinate[0]), float(coordinate[1]))
    else:
        result = CoordinateTransformer(source_epsg, target_epsg).transform(coordinate)

    if decimals is not None:
        result = CoordinatePair(
            round_half_away(result.x, decimals),
            round_half_away(result.y, decimals),
        )
    return result
