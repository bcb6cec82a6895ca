import logging
from typing import Any, Dict, List

from shapely.geometry import mapping, shape
from shapely.ops import transform

from core.exceptions import GeometryParseError

from .bbox import PointConverter
from .dispatch import check_coord_system, get_point_converter

logger = logging.getLogger(__name__)

GEOMETRY_TYPES = {
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
}


def _coord_func(converter: PointConverter):
    def _trans(x, y, z=None):
        try:
            pairs = [converter(float(a), float(b)) for a, b in zip(x, y)]
        except TypeError:
            # 标量坐标
            nx, ny = converter(float(x), float(y))
            return (nx, ny) if z is None else (nx, ny, z)
        nx = tuple(p[0] for p in pairs)
        ny = tuple(p[1] for p in pairs)
        return (nx, ny) if z is None else (nx, ny, z)

    return _trans


def transform_geometry(geom: Any, source: str, target: str, precise: bool = False) -> Any:
    """
    转换任意 shapely 几何对象的坐标系，Z 值原样保留
    """
    if geom is None or geom.is_empty:
        return geom
    converter = get_point_converter(source, target, precise)
    return transform(_coord_func(converter), geom)


def _convert_geometry_obj(geometry_obj: Any, source: str, target: str, precise: bool) -> Any:
    if geometry_obj is None:
        return None
    if not isinstance(geometry_obj, dict) or geometry_obj.get("type") not in GEOMETRY_TYPES:
        raise GeometryParseError("Invalid GeoJSON geometry", original_error=repr(geometry_obj)[:200])
    try:
        geom = shape(geometry_obj)
    except Exception as exc:  # noqa: BLE001
        raise GeometryParseError("Failed to parse GeoJSON geometry", original_error=str(exc)) from exc
    return mapping(transform_geometry(geom, source, target, precise))


def _convert_feature(feature: Any, source: str, target: str, precise: bool) -> Dict[str, Any]:
    if not isinstance(feature, dict) or feature.get("type") != "Feature":
        raise GeometryParseError("Invalid GeoJSON feature", original_error=repr(feature)[:200])
    converted = dict(feature)
    converted["geometry"] = _convert_geometry_obj(feature.get("geometry"), source, target, precise)
    return converted


def transform_geojson(obj: Any, source: str, target: str, precise: bool = False) -> Dict[str, Any]:
    """
    转换 GeoJSON 对象（Geometry / Feature / FeatureCollection）的坐标系

    Feature 的 properties 等其余字段原样拷贝。
    """
    if not isinstance(obj, dict):
        raise GeometryParseError("GeoJSON object must be a JSON object")
    check_coord_system(source)
    check_coord_system(target)

    geo_type = obj.get("type")
    if geo_type == "FeatureCollection":
        features = obj.get("features")
        if not isinstance(features, list):
            raise GeometryParseError("FeatureCollection.features must be a list")
        converted_features: List[Dict[str, Any]] = [
            _convert_feature(feat, source, target, precise) for feat in features
        ]
        result = dict(obj)
        result["features"] = converted_features
        logger.info("GeoJSON 转换 %s -> %s: %s 个要素", source, target, len(converted_features))
        return result
    if geo_type == "Feature":
        return _convert_feature(obj, source, target, precise)
    return _convert_geometry_obj(obj, source, target, precise)
