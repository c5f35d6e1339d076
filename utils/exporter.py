"""
坐标转换结果导出工具。
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Any, Iterable, Sequence

from openpyxl import Workbook

logger = logging.getLogger(__name__)

HEADERS = [
    "序号",
    "原经度",
    "原纬度",
    "转换后经度",
    "转换后纬度",
    "原坐标系",
    "目标坐标系",
]


def _iter_rows(
    source: Sequence[Sequence[Any]],
    converted: Sequence[Sequence[Any]],
    src: str,
    dst: str,
) -> Iterable[list]:
    for index, (before, after) in enumerate(zip(source, converted), start=1):
        yield [index, before[0], before[1], after[0], after[1], src, dst]


def export_points_to_xlsx(
    source: Sequence[Sequence[Any]],
    converted: Sequence[Sequence[Any]],
    src: str,
    dst: str,
) -> tuple[str, bytes]:
    """
    将批量转换前后的坐标导出为 xlsx，返回 (文件名, 文件字节)。
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "坐标转换"
    ws.append(HEADERS)

    for row in _iter_rows(source, converted, src, dst):
        ws.append(row)

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)

    filename = f"coords_{src}_to_{dst}.xlsx"
    logger.info("导出坐标转换结果为 xlsx: %s (%d 行)", filename, len(converted))
    return filename, buffer.getvalue()
