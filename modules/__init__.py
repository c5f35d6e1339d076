"""Convenience exports for service helpers."""

from .gpsconv import (
    Location,
    convert_geometry,
    convert_point,
    convert_points,
    path_length,
)

__all__ = [
    "Location",
    "convert_geometry",
    "convert_point",
    "convert_points",
    "path_length",
]
