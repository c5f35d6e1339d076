from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CoordType = Literal[
    "wgs84", "wgs-84", "gps",
    "gcj02", "gcj-02", "amap", "gaode", "tencent", "mars",
    "bd09", "bd-09", "bd09ll", "baidu",
]


class _ConvertBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    src: CoordType = Field(..., alias="from", description="Source coordinate system")
    dst: CoordType = Field(..., alias="to", description="Target coordinate system")


class ConvertRequest(_ConvertBase):
    lng: float = Field(..., description="Longitude in decimal degrees")
    lat: float = Field(..., description="Latitude in decimal degrees")


class ConvertResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lng: float
    lat: float
    src: str = Field(..., alias="from")
    dst: str = Field(..., alias="to")


class BatchConvertRequest(_ConvertBase):
    points: List[List[float]] = Field(
        ...,
        min_length=1,
        description="Point list ([[lng, lat], ...]); extra items such as altitude are kept",
    )


class BatchConvertResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    points: List[List[float]] = Field(default_factory=list)
    count: int = Field(0, ge=0)
    src: str = Field(..., alias="from")
    dst: str = Field(..., alias="to")


class GeometryConvertRequest(_ConvertBase):
    geometry: Dict[str, Any] = Field(..., description="GeoJSON geometry object")


class GeometryConvertResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    geometry: Dict[str, Any]
    src: str = Field(..., alias="from")
    dst: str = Field(..., alias="to")


class InsideChinaResponse(BaseModel):
    lng: float
    lat: float
    inside_china: bool


class DistanceRequest(BaseModel):
    from_point: List[float] = Field(..., min_length=2, max_length=2, description="[lng, lat]")
    to_point: List[float] = Field(..., min_length=2, max_length=2, description="[lng, lat]")
    coord_type: Optional[CoordType] = Field(None, description="Coordinate system of both points (defaults to settings)")


class DistanceResponse(BaseModel):
    distance_m: float
    coord_type: str


class PathLengthRequest(BaseModel):
    points: List[List[float]] = Field(..., min_length=2, description="Polyline ([[lng, lat], ...])")
    coord_type: Optional[CoordType] = Field(None, description="Coordinate system of the polyline (defaults to settings)")


class PathLengthResponse(BaseModel):
    length_m: float
    count: int
    coord_type: str
