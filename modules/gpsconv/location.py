"""
坐标值对象
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from . import core


class Location(BaseModel):
    """
    不可变的经纬度点，所有转换方法都返回新的 Location
    """

    model_config = ConfigDict(frozen=True)

    lng: float = Field(..., description="经度")
    lat: float = Field(..., description="纬度")

    @classmethod
    def of(cls, lng: float, lat: float) -> "Location":
        return cls(lng=lng, lat=lat)

    def as_tuple(self) -> Tuple[float, float]:
        return self.lng, self.lat

    def inside_china(self) -> bool:
        return core.inside_china(self.lng, self.lat)

    def distance_from(self, other: "Location") -> float:
        """与另一点的大圆距离（米）"""
        return core.distance_from(self.lng, self.lat, other.lng, other.lat)

    def wgs84_to_gcj02(self) -> "Location":
        return Location.of(*core.wgs84_to_gcj02(self.lng, self.lat))

    def gcj02_to_wgs84(self) -> "Location":
        return Location.of(*core.gcj02_to_wgs84(self.lng, self.lat))

    def gcj02_to_baidu(self) -> "Location":
        return Location.of(*core.gcj02_to_baidu(self.lng, self.lat))

    def baidu_to_gcj02(self) -> "Location":
        return Location.of(*core.baidu_to_gcj02(self.lng, self.lat))

    def wgs84_to_baidu(self) -> "Location":
        return self.wgs84_to_gcj02().gcj02_to_baidu()

    def baidu_to_wgs84(self) -> "Location":
        return self.baidu_to_gcj02().gcj02_to_wgs84()
