"""
WGS84 / GCJ-02 / BD-09 之间的基准转换

- WGS84：GPS 及国际通用的经纬度坐标；
- GCJ-02：国测局坐标（火星坐标），高德、腾讯地图使用；
- BD-09：百度坐标，在 GCJ-02 基础上再做一次极坐标加密。

gcj02_to_wgs84 为一阶近似反算（在 GCJ-02 点上求偏移后反射），往返存在小于偏移量级的残差；
bd09_to_wgs84 复用它，因此同样是近似结果。需要更高精度时使用 *_exact 迭代版本。
"""

import logging
import math
from typing import Optional, Tuple

from core.config import settings

from .constants import BD_LAT_OFFSET, BD_LNG_OFFSET, X_PI
from .mathutil import cos, sin
from .offset import compute_offset
from .region import is_outside_obfuscation_region

logger = logging.getLogger(__name__)


def wgs84_to_gcj02(lng, lat) -> Tuple[float, float]:
    """
    将WGS84坐标系转换为GCJ-02坐标系（火星坐标系）
    :param lng: WGS84坐标系的经度
    :param lat: WGS84坐标系的纬度
    :return: 转换后的GCJ-02坐标系的经纬度
    """
    lng = float(lng)
    lat = float(lat)
    if is_outside_obfuscation_region(lng, lat):
        # 若坐标点不在中国范围内，直接返回原坐标
        return lng, lat

    dlng, dlat = compute_offset(lng, lat)
    return lng + dlng, lat + dlat


def gcj02_to_wgs84(lng, lat) -> Tuple[float, float]:
    """
    将GCJ-02坐标系近似反算为WGS84坐标系

    偏移量在 GCJ-02 点本身上计算（真实 WGS84 点未知），属于一阶近似而非精确逆变换。
    :param lng: GCJ-02 坐标系的经度
    :param lat: GCJ-02 坐标系的纬度
    :return: 近似的 WGS84 经纬度 (lng, lat)
    """
    lng = float(lng)
    lat = float(lat)
    if is_outside_obfuscation_region(lng, lat):
        return lng, lat

    dlng, dlat = compute_offset(lng, lat)
    mg_lng = lng + dlng
    mg_lat = lat + dlat
    return lng * 2 - mg_lng, lat * 2 - mg_lat


def gcj02_to_wgs84_exact(
    lng,
    lat,
    max_iter: Optional[int] = None,
    threshold: Optional[float] = None,
) -> Tuple[float, float]:
    """
    将GCJ-02坐标系反推为WGS84坐标系（迭代法）。

    :param lng: GCJ-02 坐标系的经度
    :param lat: GCJ-02 坐标系的纬度
    :param max_iter: 最大迭代次数，默认取 settings.gcj02_inverse_max_iter
    :param threshold: 收敛阈值（度），默认取 settings.gcj02_inverse_threshold
    :return: 反推后的 WGS84 坐标系经纬度 (lng, lat)
    """
    lng = float(lng)
    lat = float(lat)
    if max_iter is None:
        max_iter = settings.gcj02_inverse_max_iter
    if threshold is None:
        threshold = settings.gcj02_inverse_threshold

    if is_outside_obfuscation_region(lng, lat):
        return lng, lat

    guess_lng, guess_lat = lng, lat
    for _ in range(max_iter):
        calc_lng, calc_lat = wgs84_to_gcj02(guess_lng, guess_lat)
        d_lng = calc_lng - lng
        d_lat = calc_lat - lat
        if abs(d_lng) < threshold and abs(d_lat) < threshold:
            break
        guess_lng -= d_lng
        guess_lat -= d_lat
    else:
        logger.debug(
            "GCJ-02 迭代反算未在 %s 次内收敛: (%s, %s)", max_iter, lng, lat
        )

    return guess_lng, guess_lat


def gcj02_to_bd09(lng, lat) -> Tuple[float, float]:
    """
    将GCJ-02坐标转换为BD-09坐标（不做区域判断）
    :param lng: GCJ-02 经度
    :param lat: GCJ-02 纬度
    :return: BD-09 经纬度
    """
    lng = float(lng)
    lat = float(lat)
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * cos(lng * X_PI)
    bd_lng = z * cos(theta) + BD_LNG_OFFSET
    bd_lat = z * sin(theta) + BD_LAT_OFFSET
    return bd_lng, bd_lat


def bd09_to_gcj02(lng, lat) -> Tuple[float, float]:
    """
    将BD-09坐标转换为GCJ-02坐标（不做区域判断）
    :param lng: BD-09 经度
    :param lat: BD-09 纬度
    :return: GCJ-02 经纬度
    """
    x = float(lng) - BD_LNG_OFFSET
    y = float(lat) - BD_LAT_OFFSET
    z = math.sqrt(x * x + y * y) - 0.00002 * sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * cos(x * X_PI)
    gg_lng = z * cos(theta)
    gg_lat = z * sin(theta)
    return gg_lng, gg_lat


def wgs84_to_bd09(lng, lat) -> Tuple[float, float]:
    gcj_lng, gcj_lat = wgs84_to_gcj02(lng, lat)
    return gcj02_to_bd09(gcj_lng, gcj_lat)


def bd09_to_wgs84(lng, lat) -> Tuple[float, float]:
    """BD-09 -> GCJ-02 -> WGS84，第二步为近似反算。"""
    gcj_lng, gcj_lat = bd09_to_gcj02(lng, lat)
    return gcj02_to_wgs84(gcj_lng, gcj_lat)


def bd09_to_wgs84_exact(
    lng,
    lat,
    max_iter: Optional[int] = None,
    threshold: Optional[float] = None,
) -> Tuple[float, float]:
    gcj_lng, gcj_lat = bd09_to_gcj02(lng, lat)
    return gcj02_to_wgs84_exact(gcj_lng, gcj_lat, max_iter=max_iter, threshold=threshold)
