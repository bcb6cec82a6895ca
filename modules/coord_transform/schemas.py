from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, conlist

from .dispatch import CoordSystem


class ConvertOptions(BaseModel):
    source: CoordSystem = Field("wgs84", description="Input coordinate system")
    target: CoordSystem = Field("gcj02", description="Output coordinate system")
    precise: bool = Field(
        False,
        description="Use the iterative inverse when converting GCJ-02/BD-09 back to WGS84",
    )


class PointConvertRequest(ConvertOptions):
    lng: float = Field(..., description="Longitude in degrees, or x in meters for webmercator")
    lat: float = Field(..., description="Latitude in degrees, or y in meters for webmercator")


class PointConvertResponse(BaseModel):
    lng: Optional[float] = None
    lat: Optional[float] = None
    source: CoordSystem
    target: CoordSystem


class PointsConvertRequest(ConvertOptions):
    points: List[conlist(float, min_length=2)] = Field(
        ...,
        min_length=1,
        description="Point list ([[lng, lat], ...])",
    )


class PointsConvertResponse(BaseModel):
    points: List[List[Optional[float]]] = Field(default_factory=list)
    count: int = 0
    source: CoordSystem
    target: CoordSystem


class BoundingBoxModel(BaseModel):
    north: float
    east: float
    south: float
    west: float


class BBoxConvertRequest(ConvertOptions):
    bbox: BoundingBoxModel


class BBoxConvertResponse(BaseModel):
    bbox: Dict[str, Optional[float]]
    source: CoordSystem
    target: CoordSystem


class GeoJSONConvertRequest(ConvertOptions):
    data: Dict[str, Any] = Field(
        ...,
        description="GeoJSON Geometry, Feature or FeatureCollection",
    )
