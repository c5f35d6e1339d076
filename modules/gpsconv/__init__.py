from .converter import (
    COORD_SYSTEMS,
    CoordSystem,
    convert_geometry,
    convert_point,
    convert_points,
    get_converter,
    normalize_coord_system,
    path_length,
)
from .core import (
    baidu_to_gcj02,
    baidu_to_wgs84,
    distance_from,
    gcj02_to_baidu,
    gcj02_to_wgs84,
    inside_china,
    wgs84_to_baidu,
    wgs84_to_gcj02,
)
from .location import Location

__all__ = [
    "COORD_SYSTEMS",
    "CoordSystem",
    "Location",
    "baidu_to_gcj02",
    "baidu_to_wgs84",
    "convert_geometry",
    "convert_point",
    "convert_points",
    "distance_from",
    "gcj02_to_baidu",
    "gcj02_to_wgs84",
    "get_converter",
    "inside_china",
    "normalize_coord_system",
    "path_length",
    "wgs84_to_baidu",
    "wgs84_to_gcj02",
]
