import math
from typing import Optional, Tuple
from fastapi import HTTPException, status

def parse_location(raw_value: Optional[str]) -> Tuple[float, float]:
    """
    解析 "lng,lat" 形式的查询参数（与高德 location 参数格式一致）。
    """
    trimmed = (raw_value or "").strip()
    if not trimmed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="location 不能为空，应为 lng,lat",
        )
    parts = [item.strip() for item in trimmed.split(",")]
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="location 格式错误，应为 lng,lat",
        )
    try:
        lng, lat = float(parts[0]), float(parts[1])
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="location 经纬度应为数字",
        )
    if not (math.isfinite(lng) and math.isfinite(lat)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="location 经纬度应为有限数值",
        )
    return lng, lat
