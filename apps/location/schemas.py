from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional, Tuple, Union
from datetime import datetime
from enum import Enum

from core.constants import CoordinateSystem
from core.exceptions import CoordinateSystemMismatchError
from utils.coordinate import haversine_distance, is_in_region


class CoordinateBase(BaseModel):
    """坐标基类，不直接使用

    WGS84 与 GCJ02 坐标形状相同但不能混用，两者之间只能通过
    apps.location.services 中的转换函数互相转换。
    """
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="纬度")
    longitude: float = Field(..., description="经度")

    @classmethod
    def from_degrees(cls, lat: float, lng: float):
        return cls(latitude=lat, longitude=lng)

    def as_tuple(self) -> Tuple[float, float]:
        """返回 (纬度, 经度)"""
        return self.latitude, self.longitude

    @property
    def in_region(self) -> bool:
        return is_in_region(self.latitude, self.longitude)

    def distance_to(self, other: "CoordinateBase") -> float:
        """计算到同一坐标系下另一点的大圆距离（米）"""
        if type(other) is not type(self):
            raise CoordinateSystemMismatchError(
                f"无法计算{type(self).__name__}与{type(other).__name__}之间的距离"
            )
        return haversine_distance(self.latitude, self.longitude, other.latitude, other.longitude)


class WGS84Coordinate(CoordinateBase):
    """WGS84坐标（GPS原始坐标）"""
    system: Literal[CoordinateSystem.WGS84] = Field(CoordinateSystem.WGS84, description="坐标系统")


class GCJ02Coordinate(CoordinateBase):
    """GCJ02坐标（火星坐标）"""
    system: Literal[CoordinateSystem.GCJ02] = Field(CoordinateSystem.GCJ02, description="坐标系统")


Coordinate = Union[WGS84Coordinate, GCJ02Coordinate]


class LocationSample(BaseModel):
    """一次定位结果"""
    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate = Field(..., discriminator="system", description="坐标")
    horizontal_accuracy: float = Field(..., description="水平误差（米），负数表示无效")
    timestamp: datetime = Field(default_factory=datetime.now, description="定位时间")


class LocationUpdateStatus(str, Enum):
    INITIALIZED = "initialized"
    ACCURACY_IMPROVED = "accuracy_improved"
    MOVED = "moved"
    IGNORED = "ignored"
    REJECTED_INVALID = "rejected_invalid"
    REJECTED_INACCURATE = "rejected_inaccurate"


class LocationUpdate(BaseModel):
    """向最佳位置缓存提交一次定位后的结果"""
    model_config = ConfigDict(frozen=True)

    status: LocationUpdateStatus = Field(..., description="处理结果")
    location: Optional[LocationSample] = Field(None, description="处理后的当前位置（GCJ02）")
    accuracy_improvement: Optional[float] = Field(None, description="相对缓存位置的精度提升（米）")
    distance: Optional[float] = Field(None, description="与缓存位置的距离（米）")

    @property
    def accepted(self) -> bool:
        return self.status in (
            LocationUpdateStatus.INITIALIZED,
            LocationUpdateStatus.ACCURACY_IMPROVED,
            LocationUpdateStatus.MOVED,
        )
