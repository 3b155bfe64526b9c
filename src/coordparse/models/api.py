"""
Request and response schemas for the coordinates API.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coordparse.models.crs import CoordinateSystem


class ParseRequest(BaseModel):
    """Free text to read a coordinate from."""

    text: str = Field(..., max_length=256, description="Text containing one coordinate")
    target: Optional[str] = Field(
        None,
        description="EPSG identifier or system id of the output (default: server setting)",
        examples=["EPSG:2056", "WGS84"],
    )
    decimals: Optional[int] = Field(None, ge=0, le=12, description="Decimals kept per axis")

    model_config = ConfigDict(
        json_schema_extra={"example": {"text": "2'600'000 1'200'000", "target": "EPSG:4326", "decimals": 6}}
    )


class ParseResponse(BaseModel):
    """Recognized coordinate."""

    coordinate: Tuple[float, float] = Field(..., description="Coordinate in target, x/longitude first")
    source_system: str = Field(..., description="System the text was written in")
    target: str = Field(..., description="EPSG identifier of the coordinate")


class FormatRequest(BaseModel):
    """Coordinate to render as text."""

    coordinate: Tuple[float, float] = Field(..., description="Coordinate, x/longitude first")
    system: str = Field("LV95", description="Display system: LV95, LV03, WGS84, UTM or MGRS")
    decimals: Optional[int] = Field(None, ge=0, le=12)
    source: Optional[str] = Field(
        None,
        description="EPSG identifier the coordinate is in, if not the display system's",
    )

    @field_validator("system")
    @classmethod
    def validate_system(cls, value: str) -> str:
        """Ensure the system is one of the supported ids."""
        return CoordinateSystem.from_id(value).name


class FormatResponse(BaseModel):
    """Rendered coordinate."""

    text: str
    system: str


class CentroidRequest(BaseModel):
    """Polygon ring vertices."""

    points: List[Tuple[float, float]] = Field(..., description="Ring vertices, x/longitude first")


class CentroidResponse(BaseModel):
    """Polygon centroid."""

    centroid: Tuple[float, float]


class SystemInfo(BaseModel):
    """Description of a supported reference system."""

    id: str
    epsg: str
    label: str
