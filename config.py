"""
配置管理模块
使用Pydantic Settings从环境变量加载配置
"""

from typing import List, Literal
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
    app_base_url: str = "http://localhost:8000"  # 基础URL，用于生成完整的访问链接

    # API密钥配置
    api_keys: List[str] = ["dev-only-key-change-in-production"]  # API密钥列表，用于访问鉴权

    # 日志配置
    log_level: str = Field(
        "INFO",
        validation_alias="LOG_LEVEL",
        description="日志级别（DEBUG/INFO/WARNING/ERROR）",
    )

    # 坐标转换配置
    max_batch_size: int = Field(
        5000,
        gt=0,
        validation_alias="MAX_BATCH_SIZE",
        description="单次批量转换允许的最大点数",
    )
    default_coord_system: Literal["wgs84", "gcj02", "bd09"] = Field(
        "gcj02",
        validation_alias="DEFAULT_COORD_SYSTEM",
        description="距离、路径长度接口未指定坐标系时使用的默认坐标系",
    )

    # CORS跨域配置
    cors_origins: List[str] = ["*"]  # 允许访问的域名列表


settings = Settings()
