import math
import sys
from pathlib import Path

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest

from modules.gpsconv.core import (
    baidu_to_gcj02,
    baidu_to_wgs84,
    distance_from,
    gcj02_to_baidu,
    gcj02_to_wgs84,
    inside_china,
    wgs84_to_baidu,
    wgs84_to_gcj02,
)

SAMPLE = (116.308016, 40.035937)

# 北京 / 上海 / 广州 / 乌鲁木齐 / 哈尔滨 / 三亚
CHINA_POINTS = [
    (116.3974, 39.9093),
    (121.4737, 31.2304),
    (113.2644, 23.1291),
    (87.6168, 43.8256),
    (126.6425, 45.7560),
    (109.5120, 18.2528),
]

# 伦敦 / 纽约 / 悉尼 / 莫斯科 / 布宜诺斯艾利斯
OUTSIDE_POINTS = [
    (-0.1276, 51.5072),
    (-74.0060, 40.7128),
    (151.2093, -33.8688),
    (37.6173, 55.7558),
    (-58.3816, -34.6037),
]


def _assert_close(result, expected):
    assert abs(result[0] - expected[0]) <= 0.00002
    assert abs(result[1] - expected[1]) <= 0.0002


def test_distance_fixture_values():
    assert abs(distance_from(1, 1, -1, -1) - 314851.074216824) <= 0.1
    assert abs(distance_from(1, 1, 116.3080027, 40.0359261) - 12069547.1060307) <= 0.1
    assert abs(distance_from(-1, -1, 1, 1) - 314851.074216824) <= 0.1


def test_distance_is_symmetric():
    points = CHINA_POINTS + OUTSIDE_POINTS
    for a in points:
        for b in points:
            assert distance_from(*a, *b) == distance_from(*b, *a)


def test_distance_same_point_is_zero():
    assert distance_from(*SAMPLE, *SAMPLE) == 0.0


def test_distance_one_millidegree_latitude():
    # 0.001 度纬度约 111.3 米
    distance = distance_from(127.02764, 37.49794, 127.02764, 37.49894)
    assert 110 < distance < 112


def test_distance_propagates_nan():
    assert math.isnan(distance_from(float("nan"), 0.0, 1.0, 1.0))


def test_inside_china_boundary():
    assert inside_china(72.004, 30) is False
    assert inside_china(72.01, 30) is True
    assert inside_china(137.8347, 30) is False
    assert inside_china(137.83, 30) is True
    assert inside_china(100, 0.8293) is False
    assert inside_china(100, 55.8271) is False
    assert inside_china(100, 55.82) is True


def test_inside_china_known_cities():
    for lng, lat in CHINA_POINTS:
        assert inside_china(lng, lat)
    for lng, lat in OUTSIDE_POINTS:
        assert not inside_china(lng, lat)


def test_wgs84_to_gcj02_fixture():
    _assert_close(wgs84_to_gcj02(*SAMPLE), (116.314122, 40.037216))


def test_gcj02_to_wgs84_fixture():
    _assert_close(gcj02_to_wgs84(*SAMPLE), (116.301910, 40.034658))


def test_gcj02_to_baidu_fixture():
    _assert_close(gcj02_to_baidu(*SAMPLE), (116.314490, 40.041968))


def test_baidu_to_gcj02_fixture():
    _assert_close(baidu_to_gcj02(*SAMPLE), (116.301577, 40.029790))


def test_offset_is_identity_outside_china():
    for lng, lat in OUTSIDE_POINTS + [(72.004, 30.0), (138.0, 40.0)]:
        assert wgs84_to_gcj02(lng, lat) == (lng, lat)
        assert gcj02_to_wgs84(lng, lat) == (lng, lat)


def test_gcj02_to_wgs84_is_reflection_of_forward_offset():
    forward = wgs84_to_gcj02(*SAMPLE)
    backward = gcj02_to_wgs84(*SAMPLE)
    assert backward[0] == SAMPLE[0] * 2 - forward[0]
    assert backward[1] == SAMPLE[1] * 2 - forward[1]


def test_offset_shift_is_hundreds_of_meters():
    for lng, lat in CHINA_POINTS:
        shifted = wgs84_to_gcj02(lng, lat)
        assert 10 < distance_from(lng, lat, *shifted) < 1500


def test_gcj02_round_trip_error_is_bounded():
    for lng, lat in CHINA_POINTS + [SAMPLE]:
        back = gcj02_to_wgs84(*wgs84_to_gcj02(lng, lat))
        assert back != (lng, lat)
        assert distance_from(lng, lat, *back) < 10


def test_baidu_round_trip_error_is_bounded():
    for lng, lat in CHINA_POINTS + [SAMPLE]:
        back = baidu_to_gcj02(*gcj02_to_baidu(lng, lat))
        assert distance_from(lng, lat, *back) < 5


def test_wgs84_baidu_round_trip_error_is_bounded():
    for lng, lat in CHINA_POINTS:
        back = baidu_to_wgs84(*wgs84_to_baidu(lng, lat))
        assert distance_from(lng, lat, *back) < 15


def test_composition_consistency():
    for p in CHINA_POINTS + OUTSIDE_POINTS:
        assert wgs84_to_baidu(*p) == gcj02_to_baidu(*wgs84_to_gcj02(*p))
        assert baidu_to_wgs84(*p) == gcj02_to_wgs84(*baidu_to_gcj02(*p))


def test_transforms_are_deterministic():
    assert wgs84_to_gcj02(*SAMPLE) == wgs84_to_gcj02(*SAMPLE)
    assert baidu_to_wgs84(*SAMPLE) == baidu_to_wgs84(*SAMPLE)


@pytest.mark.parametrize("lng, lat", OUTSIDE_POINTS)
def test_baidu_offset_applies_everywhere(lng, lat):
    # BD-09 扰动不受中国范围限制
    assert gcj02_to_baidu(lng, lat) != (lng, lat)


def test_non_finite_input_yields_nan_instead_of_raising():
    assert math.isnan(gcj02_to_baidu(math.inf, 0.0)[0])
    assert math.isnan(baidu_to_gcj02(-math.inf, 0.0)[0])
    assert math.isnan(distance_from(math.inf, 0.0, 1.0, 1.0))
    assert math.isnan(distance_from(0.0, math.inf, 1.0, 1.0))


def test_huge_finite_input_yields_nan_instead_of_raising():
    # x * X_PI 溢出为 inf
    lng, lat = gcj02_to_baidu(1e308, 0.0)
    assert math.isnan(lng) and math.isnan(lat)
    lng, lat = baidu_to_wgs84(1e308, 0.0)
    assert math.isnan(lng) and math.isnan(lat)
    lng, lat = wgs84_to_baidu(1e308, 0.0)
    assert math.isnan(lng) and math.isnan(lat)
