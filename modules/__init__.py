"""Convenience exports for coordinate conversion helpers."""

from .coord_transform import (
    convert_bbox,
    convert_point,
    convert_points,
    transform_geojson,
)

__all__ = [
    "convert_bbox",
    "convert_point",
    "convert_points",
    "transform_geojson",
]
