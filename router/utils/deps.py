import logging

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from core.config import settings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="Authorization", auto_error=False)


async def verify_api_key(api_key: str = Security(api_key_header)) -> bool:
    """
    API密钥验证依赖
    """
    if not api_key:
        logger.warning("API密钥缺失")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API密钥缺失：请在请求头中添加 Authorization: Bearer YOUR_API_KEY",
            headers={"WWW-Authenticate": "Bearer"},
        )

    api_key_clean = api_key.replace("Bearer ", "") if api_key.startswith("Bearer ") else api_key

    if api_key_clean not in settings.api_keys:
        logger.warning("无效的API密钥尝试: %s...", api_key[:10])
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API密钥无效：请检查密钥是否正确",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.debug("API密钥验证成功")
    return True
