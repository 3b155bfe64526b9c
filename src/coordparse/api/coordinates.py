"""
Coordinates API endpoints.
"""

import logging
from typing import List, Union

from fastapi import APIRouter

from coordparse.core.config import settings
from coordparse.core.crs.formatter import print_human_readable_coordinates
from coordparse.core.crs.transformer import reproject, resolve_epsg
from coordparse.core.errors import CRSError, ParseError, ValidationError
from coordparse.core.geometry import centroid
from coordparse.core.parsers.registry import default_target, iter_candidates
from coordparse.models.api import (
    CentroidRequest,
    CentroidResponse,
    FormatRequest,
    FormatResponse,
    ParseRequest,
    ParseResponse,
    SystemInfo,
)
from coordparse.models.crs import CoordinateSystem
from coordparse.models.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/coordinates", tags=["coordinates"])


def _resolve_projection(value: str) -> Union[CoordinateSystem, str]:
    """Accept a system id ('LV95') as well as an EPSG identifier."""
    try:
        return CoordinateSystem.from_id(value)
    except ValueError:
        return value


@router.post(
    "/parse",
    response_model=ParseResponse,
    responses={
        422: {"model": ErrorResponse, "description": "No coordinate found or unknown target"},
    },
    summary="Read a coordinate from free text",
)
async def parse_coordinate(request: ParseRequest) -> ParseResponse:
    """
    Recognize a coordinate in the text and reproject it to the target.

    Args:
        request: Text, target projection and rounding

    Returns:
        ParseResponse with the reprojected coordinate and its source system

    Raises:
        ParseError: If no coordinate could be recognized
        CRSError: If the target is not a valid projection
        ConfigurationError: If the configured default target is invalid
    """
    target = resolve_epsg(_resolve_projection(request.target)) if request.target else default_target()
    decimals = settings.default_decimals if request.decimals is None else request.decimals

    for entry, detected in iter_candidates(request.text):
        try:
            coordinate = reproject(detected.coordinate, detected.system, target, decimals)
        except CRSError as e:
            logger.warning(f"Pattern {entry.name} gave {detected} but reprojection failed: {e.message}")
            continue

        logger.info(f"Parsed {entry.name} coordinate in {detected.system.name}")
        return ParseResponse(
            coordinate=coordinate,
            source_system=detected.system.name,
            target=target,
        )

    raise ParseError("No coordinate found in text", text=request.text)


@router.post(
    "/format",
    response_model=FormatResponse,
    responses={422: {"model": ErrorResponse, "description": "Coordinate cannot be shown"}},
    summary="Render a coordinate as text",
)
async def format_coordinate(request: FormatRequest) -> FormatResponse:
    """
    Render a coordinate in one of the supported display systems.

    Args:
        request: Coordinate, display system, precision and optional source

    Returns:
        FormatResponse with the text
    """
    system = CoordinateSystem[request.system]
    source = _resolve_projection(request.source) if request.source else None
    text = print_human_readable_coordinates(
        request.coordinate, system, decimals=request.decimals, source=source
    )
    return FormatResponse(text=text, system=system.name)


@router.post(
    "/centroid",
    response_model=CentroidResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Fewer than two points"},
        422: {"model": ErrorResponse, "description": "Polygon has no area"},
    },
    summary="Compute a polygon centroid",
)
async def polygon_centroid(request: CentroidRequest) -> CentroidResponse:
    """
    Compute the area-weighted centroid of a polygon ring.

    Args:
        request: Ring vertices

    Returns:
        CentroidResponse with the centroid

    Raises:
        ValidationError: If fewer than two points are given
        GeometryError: If the ring has no area
    """
    result = centroid(*request.points)
    if result is None:
        raise ValidationError("At least two points are required", field="points")
    return CentroidResponse(centroid=result)


@router.get("/systems", response_model=List[SystemInfo], summary="List display systems")
async def list_systems() -> List[SystemInfo]:
    """
    List the supported reference systems.

    Returns:
        One entry per system
    """
    return [SystemInfo(**system.to_dict()) for system in CoordinateSystem]
