# 定位模块
# 提供WGS84/GCJ02强类型坐标、坐标转换服务以及最佳位置缓存策略

from .schemas import (
    CoordinateBase, WGS84Coordinate, GCJ02Coordinate, Coordinate,
    LocationSample, LocationUpdate, LocationUpdateStatus
)
from .services import to_gcj02, to_wgs84, convert_sample, BestLocationCache

__all__ = [
    # Schemas
    "CoordinateBase", "WGS84Coordinate", "GCJ02Coordinate", "Coordinate",
    "LocationSample", "LocationUpdate", "LocationUpdateStatus",
    # Services
    "to_gcj02", "to_wgs84", "convert_sample", "BestLocationCache",
]
