import logging
from typing import Dict, Iterable, List, Literal, Mapping, Sequence, Tuple

from core.exceptions import UnsupportedCoordSystemError

from .bbox import BoundingBox, PointConverter, transform_bbox
from .datum import (
    bd09_to_gcj02,
    bd09_to_wgs84,
    bd09_to_wgs84_exact,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    gcj02_to_wgs84_exact,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)
from .projection import web_mercator_to_wgs84, wgs84_to_web_mercator

logger = logging.getLogger(__name__)

CoordSystem = Literal["wgs84", "gcj02", "bd09", "webmercator"]

COORD_SYSTEMS: Tuple[str, ...] = ("wgs84", "gcj02", "bd09", "webmercator")


def _identity(a: float, b: float) -> Tuple[float, float]:
    return float(a), float(b)


_FROM_WGS84: Dict[str, PointConverter] = {
    "wgs84": _identity,
    "gcj02": wgs84_to_gcj02,
    "bd09": wgs84_to_bd09,
    "webmercator": wgs84_to_web_mercator,
}

_TO_WGS84: Dict[str, PointConverter] = {
    "wgs84": _identity,
    "gcj02": gcj02_to_wgs84,
    "bd09": bd09_to_wgs84,
    "webmercator": web_mercator_to_wgs84,
}

_TO_WGS84_EXACT: Dict[str, PointConverter] = {
    **_TO_WGS84,
    "gcj02": gcj02_to_wgs84_exact,
    "bd09": bd09_to_wgs84_exact,
}

# 不经过 WGS84 的直接转换，避免引入近似反算误差
_DIRECT: Dict[Tuple[str, str], PointConverter] = {
    ("gcj02", "bd09"): gcj02_to_bd09,
    ("bd09", "gcj02"): bd09_to_gcj02,
}


def check_coord_system(name: str) -> str:
    if name not in COORD_SYSTEMS:
        raise UnsupportedCoordSystemError(name, COORD_SYSTEMS)
    return name


def get_point_converter(source: str, target: str, precise: bool = False) -> PointConverter:
    """
    获取 source -> target 的点转换函数

    除 GCJ-02/BD-09 直接互转外，其余组合都经由 WGS84 中转。
    :param source: 源坐标系，wgs84 / gcj02 / bd09 / webmercator
    :param target: 目标坐标系
    :param precise: 反算 GCJ-02 时是否使用迭代法
    """
    check_coord_system(source)
    check_coord_system(target)

    if source == target:
        return _identity
    direct = _DIRECT.get((source, target))
    if direct is not None:
        return direct

    to_wgs84 = (_TO_WGS84_EXACT if precise else _TO_WGS84)[source]
    from_wgs84 = _FROM_WGS84[target]
    if source == "wgs84":
        return from_wgs84
    if target == "wgs84":
        return to_wgs84

    def _convert(a: float, b: float) -> Tuple[float, float]:
        lng, lat = to_wgs84(a, b)
        return from_wgs84(lng, lat)

    return _convert


def convert_point(a, b, source: str, target: str, precise: bool = False) -> Tuple[float, float]:
    return get_point_converter(source, target, precise)(a, b)


def convert_points(
    points: Iterable[Sequence[float]],
    source: str,
    target: str,
    precise: bool = False,
) -> List[Tuple[float, float]]:
    """
    批量转换点列表 [[a, b], ...]，每个点只取前两个分量
    """
    converter = get_point_converter(source, target, precise)
    results = [converter(pt[0], pt[1]) for pt in points]
    logger.debug("批量转换 %s -> %s: %s 个点", source, target, len(results))
    return results


def convert_bbox(
    box: Mapping[str, float],
    source: str,
    target: str,
    precise: bool = False,
) -> BoundingBox:
    return transform_bbox(box, get_point_converter(source, target, precise))
