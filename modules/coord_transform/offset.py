import math
from typing import Tuple

from .constants import EE, RADIUS
from .mathutil import cos, sin


def transform_lat(lng, lat):
    """
    计算纬度偏移量的辅助函数（输入为平移后的 lng-105, lat-35，输出单位近似为米）
    """
    ret = -100.0 + 2.0 * lng + 3.0 * lat + 0.2 * lat * lat + 0.1 * lng * lat + 0.2 * math.sqrt(abs(lng))
    ret += (20.0 * sin(6.0 * lng * math.pi) + 20.0 * sin(2.0 * lng * math.pi)) * 2.0 / 3.0
    ret += (20.0 * sin(lat * math.pi) + 40.0 * sin(lat / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (160.0 * sin(lat / 12.0 * math.pi) + 320 * sin(lat * math.pi / 30.0)) * 2.0 / 3.0
    return ret


def transform_lng(lng, lat):
    """
    计算经度偏移量的辅助函数（输入为平移后的 lng-105, lat-35，输出单位近似为米）
    """
    ret = 300.0 + lng + 2.0 * lat + 0.1 * lng * lng + 0.1 * lng * lat + 0.1 * math.sqrt(abs(lng))
    ret += (20.0 * sin(6.0 * lng * math.pi) + 20.0 * sin(2.0 * lng * math.pi)) * 2.0 / 3.0
    ret += (20.0 * sin(lng * math.pi) + 40.0 * sin(lng / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (150.0 * sin(lng / 12.0 * math.pi) + 300.0 * sin(lng * math.pi / 30.0)) * 2.0 / 3.0
    return ret


def compute_offset(lng, lat) -> Tuple[float, float]:
    """
    计算 WGS84 点对应的 GCJ-02 偏移向量 (dlng, dlat)，单位为度

    不做区域判断，调用方负责先经过 is_outside_obfuscation_region。
    :param lng: WGS84 经度
    :param lat: WGS84 纬度
    :return: 加到原坐标上即得到 GCJ-02 坐标的偏移量
    """
    lng = float(lng)
    lat = float(lat)

    # 计算转换偏移量（米）
    dlat = transform_lat(lng - 105.0, lat - 35.0)
    dlng = transform_lng(lng - 105.0, lat - 35.0)

    # 按参考纬度处的椭球弧长换算为度
    radlat = lat / 180.0 * math.pi
    magic = sin(radlat)
    magic = 1 - EE * magic * magic
    sqrtmagic = math.sqrt(magic)

    dlat = (dlat * 180.0) / ((RADIUS * (1 - EE)) / (magic * sqrtmagic) * math.pi)
    dlng = (dlng * 180.0) / (RADIUS / sqrtmagic * cos(radlat) * math.pi)
    return dlng, dlat
