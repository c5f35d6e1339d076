"""
坐标系路由与批量转换

在 wgs84 / gcj02 / bd09 之间任意互转，支持单点、点列表和 GeoJSON 几何对象。
"""

import logging
from typing import Any, Callable, Dict, List, Literal, Sequence, Tuple

from shapely.errors import ShapelyError
from shapely.geometry import mapping, shape
from shapely.ops import transform

from core.exceptions import (
    InvalidCoordinateError,
    InvalidGeometryError,
    UnsupportedCoordSystemError,
)

from .core import (
    baidu_to_gcj02,
    baidu_to_wgs84,
    distance_from,
    gcj02_to_baidu,
    gcj02_to_wgs84,
    wgs84_to_baidu,
    wgs84_to_gcj02,
)

logger = logging.getLogger(__name__)

CoordSystem = Literal["wgs84", "gcj02", "bd09"]
COORD_SYSTEMS: Tuple[str, ...] = ("wgs84", "gcj02", "bd09")

Converter = Callable[[float, float], Tuple[float, float]]

_ALIASES: Dict[str, str] = {
    "wgs84": "wgs84",
    "wgs-84": "wgs84",
    "gps": "wgs84",
    "gcj02": "gcj02",
    "gcj-02": "gcj02",
    "amap": "gcj02",
    "gaode": "gcj02",
    "tencent": "gcj02",
    "mars": "gcj02",
    "bd09": "bd09",
    "bd-09": "bd09",
    "bd09ll": "bd09",
    "baidu": "bd09",
}

_CONVERTERS: Dict[Tuple[str, str], Converter] = {
    ("wgs84", "gcj02"): wgs84_to_gcj02,
    ("gcj02", "wgs84"): gcj02_to_wgs84,
    ("gcj02", "bd09"): gcj02_to_baidu,
    ("bd09", "gcj02"): baidu_to_gcj02,
    ("wgs84", "bd09"): wgs84_to_baidu,
    ("bd09", "wgs84"): baidu_to_wgs84,
}


def _identity(lng: float, lat: float) -> Tuple[float, float]:
    return lng, lat


def normalize_coord_system(name: str) -> str:
    """
    规范化坐标系名称，支持常见别名（大小写不敏感）
    """
    key = str(name or "").strip().lower()
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnsupportedCoordSystemError(name, COORD_SYSTEMS) from None


def get_converter(src: str, dst: str) -> Converter:
    """
    获取 src -> dst 的转换函数；同坐标系返回恒等函数
    """
    src = normalize_coord_system(src)
    dst = normalize_coord_system(dst)
    if src == dst:
        return _identity
    return _CONVERTERS[(src, dst)]


def convert_point(lng: float, lat: float, src: str, dst: str) -> Tuple[float, float]:
    result = get_converter(src, dst)(lng, lat)
    logger.debug("坐标转换 %s(%s,%s) -> %s(%s,%s)", src, lng, lat, dst, result[0], result[1])
    return result


def _coerce_point(point: Any, index: int) -> Tuple[float, float, List[Any]]:
    if not isinstance(point, (list, tuple)) or len(point) < 2:
        raise InvalidCoordinateError(f"第 {index} 个点格式错误，应为 [lng, lat]", index=index)
    try:
        return float(point[0]), float(point[1]), list(point[2:])
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"第 {index} 个点的经纬度不是数字", index=index) from None


def convert_points(points: Sequence[Sequence[Any]], src: str, dst: str) -> List[List[Any]]:
    """
    批量转换 [[lng, lat, ...], ...]，经纬度之后的附加项（如高程）原样保留
    """
    converter = get_converter(src, dst)
    converted: List[List[Any]] = []
    for index, point in enumerate(points or []):
        lng, lat, rest = _coerce_point(point, index)
        new_lng, new_lat = converter(lng, lat)
        converted.append([new_lng, new_lat, *rest])
    logger.info("批量转换完成: %s -> %s, 点数=%d", src, dst, len(converted))
    return converted


def _coord_func(converter: Converter):
    """
    包装为 shapely.ops.transform 可用的函数，兼容标量与序列，保留 z
    """

    def _apply(x, y, z=None):
        try:
            iter(x)
        except TypeError:
            nx, ny = converter(x, y)
            return (nx, ny) if z is None else (nx, ny, z)

        new_x = []
        new_y = []
        for i in range(len(x)):
            nx, ny = converter(x[i], y[i])
            new_x.append(nx)
            new_y.append(ny)
        if z is None:
            return tuple(new_x), tuple(new_y)
        return tuple(new_x), tuple(new_y), tuple(z)

    return _apply


def convert_geometry(geometry: Dict[str, Any], src: str, dst: str) -> Dict[str, Any]:
    """
    转换 GeoJSON geometry（Point / LineString / Polygon / Multi* / GeometryCollection）
    """
    converter = get_converter(src, dst)
    try:
        geom = shape(geometry)
    except (KeyError, TypeError, ValueError, AttributeError, ShapelyError) as exc:
        logger.error("GeoJSON 解析失败: %s", exc)
        raise InvalidGeometryError("GeoJSON 几何对象格式错误", original_error=str(exc)) from exc

    if converter is _identity:
        return mapping(geom)
    return mapping(transform(_coord_func(converter), geom))


def path_length(points: Sequence[Sequence[Any]], coord_system: str = "wgs84") -> float:
    """
    折线总长度（米），先统一转为 WGS84 再逐段累加大圆距离
    """
    wgs_points = convert_points(points, coord_system, "wgs84")
    total = 0.0
    for prev, curr in zip(wgs_points, wgs_points[1:]):
        total += distance_from(prev[0], prev[1], curr[0], curr[1])
    return total
