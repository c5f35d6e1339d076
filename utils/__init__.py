"""
工具函数入口：统一对外暴露常用方法。
"""

from .exporter import export_points_to_xlsx
from .parse_location import parse_location

__all__ = [
    "export_points_to_xlsx",
    "parse_location",
]
