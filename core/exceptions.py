from typing import Any, Dict, Optional, Sequence

class BizError(Exception):
    """
    通用业务异常
    """
    def __init__(
        self,
        message: str,
        code: int = 400,
        payload: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.payload = payload or {}
        super().__init__(self.message)

class UnsupportedCoordSystemError(BizError):
    """
    不支持的坐标系名称
    """
    def __init__(self, name: str, supported: Sequence[str] = ()):
        super().__init__(
            message=f"Unsupported coordinate system: {name!r}",
            code=400,
            payload={"coord_system": str(name), "supported": list(supported)}
        )

class GeometryParseError(BizError):
    """
    GeoJSON 几何解析失败
    """
    def __init__(self, message: str, original_error: str = ""):
        super().__init__(
            message=message,
            code=422,
            payload={"original_error": str(original_error)}
        )

class BatchTooLargeError(BizError):
    """
    批量转换点数超过上限
    """
    def __init__(self, count: int, limit: int):
        super().__init__(
            message=f"Too many points in one request: {count} > {limit}",
            code=413,
            payload={"count": count, "limit": limit}
        )
