import asyncio
import logging
from io import BytesIO

from fastapi import APIRouter, Query, Security
from fastapi.responses import StreamingResponse

from config import settings
from modules.gpsconv import (
    convert_geometry,
    convert_point,
    convert_points,
    distance_from,
    inside_china,
    normalize_coord_system,
    path_length,
)
from modules.gpsconv.schemas import (
    BatchConvertRequest,
    BatchConvertResponse,
    ConvertRequest,
    ConvertResponse,
    DistanceRequest,
    DistanceResponse,
    GeometryConvertRequest,
    GeometryConvertResponse,
    InsideChinaResponse,
    PathLengthRequest,
    PathLengthResponse,
)
from utils import export_points_to_xlsx, parse_location

from .utils.deps import ensure_batch_size, ensure_finite, verify_api_key

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/coords",
    tags=["Coordinate Conversion"],
    dependencies=[Security(verify_api_key)],
)


@router.post(
    "/convert",
    response_model=ConvertResponse,
    summary="单点坐标转换",
    description="在 wgs84 / gcj02 / bd09 之间转换单个坐标点",
)
async def convert_single(payload: ConvertRequest):
    src = normalize_coord_system(payload.src)
    dst = normalize_coord_system(payload.dst)
    lng, lat = convert_point(payload.lng, payload.lat, src, dst)
    ensure_finite((lng, lat))
    return ConvertResponse(lng=lng, lat=lat, src=src, dst=dst)


@router.post(
    "/convert/batch",
    response_model=BatchConvertResponse,
    summary="批量坐标转换",
)
async def convert_batch(payload: BatchConvertRequest):
    ensure_batch_size(len(payload.points))
    src = normalize_coord_system(payload.src)
    dst = normalize_coord_system(payload.dst)
    points = await asyncio.to_thread(convert_points, payload.points, src, dst)
    ensure_finite(points)
    return BatchConvertResponse(points=points, count=len(points), src=src, dst=dst)


@router.post(
    "/convert/batch/xlsx",
    summary="批量坐标转换并导出xlsx",
)
async def convert_batch_xlsx(payload: BatchConvertRequest):
    """批量转换后导出转换前后对照表。"""
    ensure_batch_size(len(payload.points))
    src = normalize_coord_system(payload.src)
    dst = normalize_coord_system(payload.dst)
    points = await asyncio.to_thread(convert_points, payload.points, src, dst)
    ensure_finite(points)
    filename, content = export_points_to_xlsx(payload.points, points, src, dst)
    return StreamingResponse(
        BytesIO(content),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "/convert/geometry",
    response_model=GeometryConvertResponse,
    summary="GeoJSON 几何对象坐标转换",
)
async def convert_geometry_endpoint(payload: GeometryConvertRequest):
    src = normalize_coord_system(payload.src)
    dst = normalize_coord_system(payload.dst)
    geometry = await asyncio.to_thread(convert_geometry, payload.geometry, src, dst)
    ensure_finite(geometry)
    return GeometryConvertResponse(geometry=geometry, src=src, dst=dst)


@router.get(
    "/inside-china",
    response_model=InsideChinaResponse,
    summary="判断坐标是否在中国范围内",
)
async def check_inside_china(
    location: str = Query(..., description="lng,lat"),
):
    lng, lat = parse_location(location)
    return InsideChinaResponse(lng=lng, lat=lat, inside_china=inside_china(lng, lat))


@router.post(
    "/distance",
    response_model=DistanceResponse,
    summary="两点大圆距离（米）",
)
async def calc_distance(payload: DistanceRequest):
    coord_type = normalize_coord_system(payload.coord_type or settings.default_coord_system)
    (lng1, lat1), (lng2, lat2) = convert_points(
        [payload.from_point, payload.to_point], coord_type, "wgs84"
    )
    distance = distance_from(lng1, lat1, lng2, lat2)
    ensure_finite(distance)
    logger.debug("距离计算: %s -> %s = %.3f m", payload.from_point, payload.to_point, distance)
    return DistanceResponse(distance_m=distance, coord_type=coord_type)


@router.post(
    "/path-length",
    response_model=PathLengthResponse,
    summary="折线长度（米）",
)
async def calc_path_length(payload: PathLengthRequest):
    ensure_batch_size(len(payload.points))
    coord_type = normalize_coord_system(payload.coord_type or settings.default_coord_system)
    length = await asyncio.to_thread(path_length, payload.points, coord_type)
    ensure_finite(length)
    return PathLengthResponse(length_m=length, count=len(payload.points), coord_type=coord_type)
