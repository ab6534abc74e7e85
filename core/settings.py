# -*- coding: utf-8 -*-
"""
统一配置文件
整合了项目的配置信息，包括日志配置、坐标转换配置和定位策略配置。
所有配置项都可以通过环境变量或 .env 文件覆盖。
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """统一配置类"""

    # ==================== 日志配置 ====================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    LOG_FILE_PATH: Optional[str] = None  # 为空时只输出到控制台
    LOG_ROTATION: str = "500 MB"
    LOG_RETENTION: str = "10 days"

    # ==================== 坐标转换配置 ====================
    COORDS_INVERSE_ITERATIONS: int = 2  # GCJ02 -> WGS84 迭代次数，2 为参考实现行为

    # ==================== 定位策略配置 ====================
    LOCATION_MAX_ACCEPTABLE_ACCURACY: float = 100.0  # 可接受的最大水平误差（米）
    LOCATION_MIN_ACCURACY_IMPROVEMENT: float = 10.0  # 精度至少提升多少才替换缓存（米）
    LOCATION_DISTANCE_FILTER: float = 10.0  # 移动超过该距离才视为位置变化（米）

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
