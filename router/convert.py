import asyncio
import logging
import math
from typing import Any, Dict, Optional

from fastapi import APIRouter, Security

from core.config import settings
from core.exceptions import BatchTooLargeError
from modules.coord_transform import (
    COORD_SYSTEMS,
    convert_bbox,
    convert_point,
    convert_points,
    transform_geojson,
)
from modules.coord_transform.schemas import (
    BBoxConvertRequest,
    BBoxConvertResponse,
    GeoJSONConvertRequest,
    PointConvertRequest,
    PointConvertResponse,
    PointsConvertRequest,
    PointsConvertResponse,
)

from .utils.deps import verify_api_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/convert", tags=["Coordinate Conversion"])


def _finite_or_none(value: float) -> Optional[float]:
    # JSON 不支持 NaN/Infinity，统一输出为 null
    return value if math.isfinite(value) else None


@router.get("/systems", summary="支持的坐标系")
async def list_coord_systems():
    return {"systems": list(COORD_SYSTEMS)}


@router.post(
    "/point",
    response_model=PointConvertResponse,
    summary="单点坐标转换",
)
async def convert_point_endpoint(payload: PointConvertRequest):
    lng, lat = convert_point(
        payload.lng,
        payload.lat,
        payload.source,
        payload.target,
        precise=payload.precise,
    )
    logger.debug(
        "Converted %s(%s,%s) -> %s(%s,%s)",
        payload.source, payload.lng, payload.lat, payload.target, lng, lat,
    )
    return PointConvertResponse(
        lng=_finite_or_none(lng),
        lat=_finite_or_none(lat),
        source=payload.source,
        target=payload.target,
    )


@router.post(
    "/points",
    response_model=PointsConvertResponse,
    summary="批量坐标转换",
    description="点数上限由 MAX_BATCH_POINTS 配置",
)
async def convert_points_endpoint(payload: PointsConvertRequest):
    if len(payload.points) > settings.max_batch_points:
        raise BatchTooLargeError(len(payload.points), settings.max_batch_points)

    results = await asyncio.to_thread(
        convert_points,
        payload.points,
        payload.source,
        payload.target,
        payload.precise,
    )
    logger.info("批量转换完成: %s -> %s, %s 个点", payload.source, payload.target, len(results))
    return PointsConvertResponse(
        points=[[_finite_or_none(a), _finite_or_none(b)] for a, b in results],
        count=len(results),
        source=payload.source,
        target=payload.target,
    )


@router.post(
    "/bbox",
    response_model=BBoxConvertResponse,
    summary="包围盒坐标转换",
    description="分别转换 (west, south) 与 (east, north) 两个角点",
)
async def convert_bbox_endpoint(payload: BBoxConvertRequest):
    box = convert_bbox(
        payload.bbox.model_dump(),
        payload.source,
        payload.target,
        precise=payload.precise,
    )
    return BBoxConvertResponse(
        bbox={key: _finite_or_none(value) for key, value in box.items()},
        source=payload.source,
        target=payload.target,
    )


@router.post(
    "/geojson",
    summary="GeoJSON 坐标转换",
    description="支持 Geometry / Feature / FeatureCollection。需要在请求头中添加 Authorization: Bearer YOUR_API_KEY",
)
async def convert_geojson_endpoint(
    payload: GeoJSONConvertRequest,
    api_key_valid: bool = Security(verify_api_key),
) -> Dict[str, Any]:
    return await asyncio.to_thread(
        transform_geojson,
        payload.data,
        payload.source,
        payload.target,
        payload.precise,
    )
