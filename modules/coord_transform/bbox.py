"""
包围盒辅助函数

包围盒形如 {north, east, south, west}，单位随坐标类型（度或米）。
四个值互相独立：只转换 (west, south) 与 (east, north) 两个角点再重新组装，
不检查 north > south 等几何有效性，也不补偿投影在盒内的形变。
"""

from typing import Callable, Mapping, Tuple, TypedDict

from .datum import (
    bd09_to_gcj02,
    bd09_to_wgs84,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)

PointConverter = Callable[[float, float], Tuple[float, float]]


class BoundingBox(TypedDict):
    north: float
    east: float
    south: float
    west: float


def transform_bbox(box: Mapping[str, float], point_fn: PointConverter) -> BoundingBox:
    """
    对包围盒的两个角点分别应用点转换函数
    :param box: 含 north/east/south/west 的映射
    :param point_fn: (x, y) -> (x, y) 的点转换函数
    :return: 新的包围盒
    """
    west, south = point_fn(box["west"], box["south"])
    east, north = point_fn(box["east"], box["north"])
    return BoundingBox(north=north, east=east, south=south, west=west)


def wgs84_to_gcj02_bb(box: Mapping[str, float]) -> BoundingBox:
    return transform_bbox(box, wgs84_to_gcj02)


def gcj02_to_wgs84_bb(box: Mapping[str, float]) -> BoundingBox:
    return transform_bbox(box, gcj02_to_wgs84)


def gcj02_to_bd09_bb(box: Mapping[str, float]) -> BoundingBox:
    return transform_bbox(box, gcj02_to_bd09)


def bd09_to_gcj02_bb(box: Mapping[str, float]) -> BoundingBox:
    return transform_bbox(box, bd09_to_gcj02)


def wgs84_to_bd09_bb(box: Mapping[str, float]) -> BoundingBox:
    return transform_bbox(box, wgs84_to_bd09)


def bd09_to_wgs84_bb(box: Mapping[str, float]) -> BoundingBox:
    return transform_bbox(box, bd09_to_wgs84)
