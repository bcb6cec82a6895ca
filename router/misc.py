from datetime import datetime

from fastapi import APIRouter

from core.config import settings

router = APIRouter()


@router.get("/health", summary="健康检查")
async def health_check():
    """检查服务是否正常运行"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": "1.0.0",
    }


@router.get("/", summary="根路径")
async def root():
    """返回欢迎信息"""
    return {
        "message": "坐标转换服务：WGS84 / GCJ-02 / BD-09 / WebMercator",
        "docs": f"http://localhost:{settings.app_port}/docs",
        "health": "/health",
    }
