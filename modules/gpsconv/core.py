"""
坐标系转换核心算法（WGS84 / GCJ-02 / BD-09）

所有函数均为纯函数：入参为经度、纬度（十进制度），经度在前。
不做范围校验，非法输入按公式直接计算（可能得到 NaN）。
"""

import math
from typing import Tuple

# Krasovsky 1940 椭球
# A = 6378245.0, 1/f = 298.3
# B = A * (1 - f)
# EE = (A^2 - B^2) / A^2
A = 6378245.0
EE = 0.00669342162296594323
X_PI = math.pi * 3000.0 / 180.0

# 球面距离使用的地球半径（米）
EARTH_RADIUS = 6378137.0

# 中国范围粗略矩形：(最小经度, 最大经度, 最小纬度, 最大纬度)
CHINA_BBOX = (72.004, 137.8347, 0.8293, 55.8271)

LngLat = Tuple[float, float]


def _sin(x: float) -> float:
    # 非有限值返回 NaN，math.sin 对 inf 会抛 ValueError
    return math.sin(x) if math.isfinite(x) else math.nan


def _cos(x: float) -> float:
    return math.cos(x) if math.isfinite(x) else math.nan


def _asin(x: float) -> float:
    # 定义域外（含浮点误差导致的 s > 1）返回 NaN，不做截断
    return math.asin(x) if -1.0 <= x <= 1.0 else math.nan


def inside_china(lng: float, lat: float) -> bool:
    """
    判断坐标点是否落在中国范围矩形内（开区间，边界上的点视为境外）
    仅用于决定是否施加偏移，不是精确的国界判断。
    注意：通行实现只用 < / > 排除，四条边上的点都算境内；
    此处四条边均视为境外，137.8347、0.8293、55.8271 三条边上的点与之结果不同。
    """
    min_lng, max_lng, min_lat, max_lat = CHINA_BBOX
    if lng <= min_lng or lng >= max_lng:
        return False
    if lat <= min_lat or lat >= max_lat:
        return False
    return True


def distance_from(lng1: float, lat1: float, lng2: float, lat2: float) -> float:
    """
    计算两点间的大圆距离（haversine），单位：米
    """
    rad1 = lat1 / 180.0 * math.pi
    rad2 = lat2 / 180.0 * math.pi

    a = rad1 - rad2
    b = (lng1 - lng2) / 180.0 * math.pi

    s = math.pow(_sin(a / 2), 2)
    s += _cos(rad1) * _cos(rad2) * math.pow(_sin(b / 2), 2)

    return 2 * _asin(math.sqrt(s)) * EARTH_RADIUS


def _offset(lng: float, lat: float) -> LngLat:
    """
    按经验公式计算偏移后的坐标（以 105E, 35N 为原点）
    """
    x = lng - 105.0
    y = lat - 35.0

    rad = lat / 180.0 * math.pi
    sin = _sin(rad)
    cos = _cos(rad)
    magic = 1 - EE * sin * sin
    sqrt_magic = math.sqrt(magic)

    d_lng = 20.0 * _sin(6.0 * x * math.pi) + 20.0 * _sin(2.0 * x * math.pi)
    d_lat = d_lng

    d_lng += 20.0 * _sin(x * math.pi) + 40.0 * _sin(x / 3.0 * math.pi)
    d_lng += 150.0 * _sin(x / 12.0 * math.pi) + 300.0 * _sin(x / 30.0 * math.pi)
    d_lng = d_lng * 2.0 / 3.0
    d_lng += 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    d_lng = (d_lng * 180.0) / (A / sqrt_magic * cos * math.pi)

    d_lat += 20.0 * _sin(y * math.pi) + 40.0 * _sin(y / 3.0 * math.pi)
    d_lat += 160.0 * _sin(y / 12.0 * math.pi) + 320 * _sin(y * math.pi / 30.0)
    d_lat = d_lat * 2.0 / 3.0
    d_lat += -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    d_lat = (d_lat * 180.0) / ((A * (1 - EE)) / (magic * sqrt_magic) * math.pi)

    return lng + d_lng, lat + d_lat


def wgs84_to_gcj02(lng: float, lat: float) -> LngLat:
    """
    将WGS84坐标系转换为GCJ-02坐标系（火星坐标系）
    :param lng: WGS84坐标系的经度
    :param lat: WGS84坐标系的纬度
    :return: 转换后的GCJ-02坐标系的经纬度
    """
    if not inside_china(lng, lat):
        # 若坐标点不在中国范围内，直接返回原坐标
        return lng, lat
    return _offset(lng, lat)


def gcj02_to_wgs84(lng: float, lat: float) -> LngLat:
    """
    将GCJ-02坐标系反推为WGS84坐标系（一阶近似）

    在GCJ-02点上直接求偏移再对称回退，单次计算不迭代，误差为米级。
    :param lng: GCJ-02 坐标系的经度
    :param lat: GCJ-02 坐标系的纬度
    :return: 反推后的 WGS84 坐标系经纬度 (lng, lat)
    """
    if not inside_china(lng, lat):
        return lng, lat
    shifted_lng, shifted_lat = _offset(lng, lat)
    return lng * 2 - shifted_lng, lat * 2 - shifted_lat


def gcj02_to_baidu(lng: float, lat: float) -> LngLat:
    """
    GCJ-02 -> BD-09（百度坐标系）
    """
    x = lng
    y = lat
    z = math.sqrt(x * x + y * y) + 0.00002 * _sin(y * X_PI)
    theta = math.atan2(y, x) + 0.000003 * _cos(x * X_PI)
    return z * _cos(theta) + 0.0065, z * _sin(theta) + 0.006


def baidu_to_gcj02(lng: float, lat: float) -> LngLat:
    """
    BD-09 -> GCJ-02（近似逆变换）
    """
    x = lng - 0.0065
    y = lat - 0.006
    z = math.sqrt(x * x + y * y) - 0.00002 * _sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * _cos(x * X_PI)
    return z * _cos(theta), z * _sin(theta)


def wgs84_to_baidu(lng: float, lat: float) -> LngLat:
    """WGS84 -> GCJ-02 -> BD-09"""
    return gcj02_to_baidu(*wgs84_to_gcj02(lng, lat))


def baidu_to_wgs84(lng: float, lat: float) -> LngLat:
    """BD-09 -> GCJ-02 -> WGS84"""
    return gcj02_to_wgs84(*baidu_to_gcj02(lng, lat))
