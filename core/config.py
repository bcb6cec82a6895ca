"""
配置管理模块
使用Pydantic Settings从环境变量加载配置
"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类
    从环境变量加载配置，支持类型转换和验证
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 未声明的 env 变量忽略，不抛出校验错误
    )

    # 应用配置
    app_host: str = "0.0.0.0"  # 应用主机地址，默认0.0.0.0（允许外部访问）
    app_port: int = 8000  # 应用端口，默认8000
    log_level: str = Field(
        "INFO",
        validation_alias="LOG_LEVEL",
        description="日志级别",
    )

    # API密钥配置
    api_keys: List[str] = ["dev-only-key-change-in-production"]  # API密钥列表，用于访问鉴权

    # CORS跨域配置
    cors_origins: List[str] = ["*"]  # 允许访问的域名列表

    # 坐标转换服务配置
    max_batch_points: int = Field(
        10000,
        ge=1,
        validation_alias="MAX_BATCH_POINTS",
        description="批量转换接口单次允许的最大点数",
    )
    gcj02_inverse_max_iter: int = Field(
        10,
        ge=1,
        validation_alias="GCJ02_INVERSE_MAX_ITER",
        description="GCJ-02 迭代反算的最大迭代次数",
    )
    gcj02_inverse_threshold: float = Field(
        1e-6,
        gt=0,
        validation_alias="GCJ02_INVERSE_THRESHOLD",
        description="GCJ-02 迭代反算的收敛阈值（度）",
    )


settings = Settings()
