"""
坐标转换：WGS84 / GCJ-02 / BD-09 经纬度与球面 Web Mercator 投影坐标的相互转换。
全部为无状态纯函数，可在任意线程中并发调用。
"""

from .bbox import (
    BoundingBox,
    bd09_to_gcj02_bb,
    bd09_to_wgs84_bb,
    gcj02_to_bd09_bb,
    gcj02_to_wgs84_bb,
    transform_bbox,
    wgs84_to_bd09_bb,
    wgs84_to_gcj02_bb,
)
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
from .dispatch import (
    COORD_SYSTEMS,
    check_coord_system,
    convert_bbox,
    convert_point,
    convert_points,
    get_point_converter,
)
from .geometry import transform_geojson, transform_geometry
from .offset import compute_offset
from .projection import (
    web_mercator_to_wgs84,
    web_mercator_to_wgs84_bb,
    wgs84_to_web_mercator,
    wgs84_to_web_mercator_bb,
)
from .region import is_outside_obfuscation_region

__all__ = [
    "BoundingBox",
    "COORD_SYSTEMS",
    "bd09_to_gcj02",
    "bd09_to_gcj02_bb",
    "bd09_to_wgs84",
    "bd09_to_wgs84_bb",
    "bd09_to_wgs84_exact",
    "check_coord_system",
    "compute_offset",
    "convert_bbox",
    "convert_point",
    "convert_points",
    "gcj02_to_bd09",
    "gcj02_to_bd09_bb",
    "gcj02_to_wgs84",
    "gcj02_to_wgs84_bb",
    "gcj02_to_wgs84_exact",
    "get_point_converter",
    "is_outside_obfuscation_region",
    "transform_bbox",
    "transform_geojson",
    "transform_geometry",
    "web_mercator_to_wgs84",
    "web_mercator_to_wgs84_bb",
    "wgs84_to_bd09",
    "wgs84_to_bd09_bb",
    "wgs84_to_gcj02",
    "wgs84_to_gcj02_bb",
    "wgs84_to_web_mercator",
    "wgs84_to_web_mercator_bb",
]
