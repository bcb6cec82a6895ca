"""
球面 Web Mercator 投影（EPSG:3857）

使用 WGS84 长半轴作为球半径，与 GCJ-02 偏移算法的椭球参数无关。
正算结果保留 2 位小数（米），反算结果保留 6 位小数（度）。
"""

import math
from typing import Mapping, Tuple

from .bbox import BoundingBox, transform_bbox
from .constants import (
    MERCATOR_LNGLAT_DIGITS,
    MERCATOR_MAX_LATITUDE,
    MERCATOR_RADIUS,
    MERCATOR_XY_DIGITS,
)
from .mathutil import sin


def _latitude_to_mercator_angle(lat_deg: float) -> float:
    # 纬度截断到投影正方形范围内，极点不会产生 log(0)
    lat_deg = min(max(lat_deg, -MERCATOR_MAX_LATITUDE), MERCATOR_MAX_LATITUDE)
    sin_lat = sin(math.radians(lat_deg))
    return 0.5 * math.log((1.0 + sin_lat) / (1.0 - sin_lat))


def _mercator_angle_to_latitude(angle: float) -> float:
    # 按符号选择公式，保证 exp 的参数不为正，避免 OverflowError
    if angle < 0:
        return 2.0 * math.atan(math.exp(angle)) - math.pi / 2.0
    return math.pi / 2.0 - 2.0 * math.atan(math.exp(-angle))


def wgs84_to_web_mercator(lng, lat) -> Tuple[float, float]:
    """
    WGS84地理坐标转WebMercator投影坐标
    :param lng: 经度（单位为度）
    :param lat: 纬度（单位为度）
    :return: WebMercator投影坐标 (x, y)（单位为米，保留2位小数）
    """
    lng = float(lng)
    lat = float(lat)
    x = math.radians(lng) * MERCATOR_RADIUS
    y = _latitude_to_mercator_angle(lat) * MERCATOR_RADIUS
    return round(x, MERCATOR_XY_DIGITS), round(y, MERCATOR_XY_DIGITS)


def web_mercator_to_wgs84(x, y) -> Tuple[float, float]:
    """
    WebMercator投影坐标转WGS84地理坐标
    :param x: 横坐标（单位为米）
    :param y: 纵坐标（单位为米）
    :return: WGS84坐标 (lng, lat)（单位为度，保留6位小数）
    """
    x = float(x)
    y = float(y)
    lng = math.degrees(x / MERCATOR_RADIUS)
    lat = math.degrees(_mercator_angle_to_latitude(y / MERCATOR_RADIUS))
    return round(lng, MERCATOR_LNGLAT_DIGITS), round(lat, MERCATOR_LNGLAT_DIGITS)


def wgs84_to_web_mercator_bb(box: Mapping[str, float]) -> BoundingBox:
    """WGS84包围盒（度）转WebMercator包围盒（米）"""
    return transform_bbox(box, wgs84_to_web_mercator)


def web_mercator_to_wgs84_bb(box: Mapping[str, float]) -> BoundingBox:
    """WebMercator包围盒（米）转WGS84包围盒（度）"""
    return transform_bbox(box, web_mercator_to_wgs84)
