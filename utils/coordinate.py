"""坐标系统转换工具

提供WGS84与GCJ02两种坐标系统之间的相互转换功能。

WGS84：GPS坐标系，国际通用坐标系
GCJ02：国测局坐标系，火星坐标系，中国大陆公开地图使用的经过加密的坐标系

所有函数均为纯函数，参数和返回值统一为 (纬度, 经度)，单位为度。
超出经纬度合法范围的输入不做校验，照常计算。
"""

import math
from typing import Tuple

from core.constants import (
    CoordinateSystem,
    EARTH_MEAN_RADIUS,
    ELLIPSOID_A,
    ELLIPSOID_EE,
    INVERSE_ITERATIONS,
    REFERENCE_LATITUDE,
    REFERENCE_LONGITUDE,
    REGION_MAX_LATITUDE,
    REGION_MAX_LONGITUDE,
    REGION_MIN_LATITUDE,
    REGION_MIN_LONGITUDE,
)
from core.exceptions import UnsupportedCoordinateSystemError


def _transform_lat(x: float, y: float) -> float:
    """GCJ02坐标转换算法中纬度转换"""
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * math.pi) + 40.0 * math.sin(y / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * math.pi) + 320 * math.sin(y * math.pi / 30.0)) * 2.0 / 3.0
    return ret

def _transform_lng(x: float, y: float) -> float:
    """GCJ02坐标转换算法中经度转换"""
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * math.pi) + 40.0 * math.sin(x / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * math.pi) + 300.0 * math.sin(x / 30.0 * math.pi)) * 2.0 / 3.0
    return ret

def _offset(lat: float, lng: float) -> Tuple[float, float]:
    """计算某点的 GCJ02 偏移量（度），不做区域判断"""
    d_lat = _transform_lat(lng - REFERENCE_LONGITUDE, lat - REFERENCE_LATITUDE)
    d_lng = _transform_lng(lng - REFERENCE_LONGITUDE, lat - REFERENCE_LATITUDE)

    rad_lat = lat / 180.0 * math.pi
    magic = math.sin(rad_lat)
    magic = 1 - ELLIPSOID_EE * magic * magic
    sqrt_magic = math.sqrt(magic)

    d_lat = (d_lat * 180.0) / ((ELLIPSOID_A * (1 - ELLIPSOID_EE)) / (magic * sqrt_magic) * math.pi)
    d_lng = (d_lng * 180.0) / (ELLIPSOID_A / sqrt_magic * math.cos(rad_lat) * math.pi)
    return d_lat, d_lng

def is_in_region(lat: float, lng: float) -> bool:
    """判断坐标是否落在中国大陆的粗略矩形范围内

    这是一个快速过滤而不是精确的国界判断：台湾、边境地区以及矩形内的海域
    都会被视为"在范围内"。非法经纬度（如纬度大于90）直接返回 False。
    """
    return (REGION_MIN_LATITUDE <= lat <= REGION_MAX_LATITUDE
            and REGION_MIN_LONGITUDE <= lng <= REGION_MAX_LONGITUDE)

def wgs84_to_gcj02(lat: float, lng: float) -> Tuple[float, float]:
    """WGS84坐标系转GCJ02坐标系

    同一个值只能转换一次，重复转换会叠加偏移。

    Args:
        lat: WGS84坐标系下的纬度
        lng: WGS84坐标系下的经度

    Returns:
        Tuple[float, float]: GCJ02坐标系下的纬度和经度
    """
    if not is_in_region(lat, lng):
        return lat, lng

    d_lat, d_lng = _offset(lat, lng)
    return lat + d_lat, lng + d_lng

def gcj02_to_wgs84(lat: float, lng: float, iterations: int = INVERSE_ITERATIONS) -> Tuple[float, float]:
    """GCJ02坐标系转WGS84坐标系（迭代逼近）

    逆变换没有解析解。以输入点作为初始估计，每一轮按估计点重新计算正向偏移，
    再从输入点中减去该偏移。默认两轮，误差在厘米到数米之间。

    Args:
        lat: GCJ02坐标系下的纬度
        lng: GCJ02坐标系下的经度
        iterations: 迭代轮数，增加轮数可提高精度

    Returns:
        Tuple[float, float]: WGS84坐标系下的纬度和经度
    """
    if iterations < 1:
        raise ValueError(f"迭代次数必须大于0，当前为{iterations}")

    if not is_in_region(lat, lng):
        return lat, lng

    wgs_lat, wgs_lng = lat, lng
    for _ in range(iterations):
        d_lat, d_lng = _offset(wgs_lat, wgs_lng)
        mg_lat = wgs_lat + d_lat
        mg_lng = wgs_lng + d_lng
        wgs_lat = lat - (mg_lat - wgs_lat)
        wgs_lng = lng - (mg_lng - wgs_lng)

    return wgs_lat, wgs_lng

def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """计算两点间的大圆距离（米）"""
    hav = lambda theta: math.sin(theta / 2) ** 2

    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = hav(d_lat) + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * hav(d_lng)
    return 2 * EARTH_MEAN_RADIUS * math.asin(math.sqrt(min(1.0, a)))

def offset_distance(lat: float, lng: float) -> float:
    """WGS84坐标与其GCJ02坐标之间的距离（米），范围外为0"""
    gcj_lat, gcj_lng = wgs84_to_gcj02(lat, lng)
    return haversine_distance(lat, lng, gcj_lat, gcj_lng)

def convert_coordinates(lat: float, lng: float, from_sys: str, to_sys: str) -> Tuple[float, float]:
    """坐标系统转换函数

    Args:
        lat: 原始纬度
        lng: 原始经度
        from_sys: 原始坐标系统，可选值：'wgs84', 'gcj02'
        to_sys: 目标坐标系统，可选值：'wgs84', 'gcj02'

    Returns:
        Tuple[float, float]: 转换后的纬度和经度
    """
    try:
        source = CoordinateSystem(str(from_sys).lower())
        target = CoordinateSystem(str(to_sys).lower())
    except ValueError:
        raise UnsupportedCoordinateSystemError(f"不支持从{from_sys}转换到{to_sys}的坐标系统转换")

    # 如果源坐标系和目标坐标系相同，则不需要转换
    if source == target:
        return lat, lng

    if source == CoordinateSystem.WGS84:
        return wgs84_to_gcj02(lat, lng)
    return gcj02_to_wgs84(lat, lng)
