import threading
from typing import Optional

from loguru import logger

from core.exceptions import CoordinateSystemMismatchError
from core.settings import settings
from utils.coordinate import gcj02_to_wgs84, wgs84_to_gcj02
from .schemas import (
    GCJ02Coordinate,
    LocationSample,
    LocationUpdate,
    LocationUpdateStatus,
    WGS84Coordinate,
)


def to_gcj02(coordinate: WGS84Coordinate) -> GCJ02Coordinate:
    """WGS84坐标转GCJ02坐标

    只接受 WGS84Coordinate，传入 GCJ02 坐标会直接报错，避免重复偏移。
    """
    if not isinstance(coordinate, WGS84Coordinate):
        raise CoordinateSystemMismatchError(
            f"to_gcj02 需要 WGS84 坐标，收到 {type(coordinate).__name__}"
        )
    lat, lng = wgs84_to_gcj02(coordinate.latitude, coordinate.longitude)
    return GCJ02Coordinate(latitude=lat, longitude=lng)


def to_wgs84(coordinate: GCJ02Coordinate, iterations: Optional[int] = None) -> WGS84Coordinate:
    """GCJ02坐标转WGS84坐标

    Args:
        coordinate: GCJ02坐标
        iterations: 迭代次数，默认使用 settings.COORDS_INVERSE_ITERATIONS
    """
    if not isinstance(coordinate, GCJ02Coordinate):
        raise CoordinateSystemMismatchError(
            f"to_wgs84 需要 GCJ02 坐标，收到 {type(coordinate).__name__}"
        )
    if iterations is None:
        iterations = settings.COORDS_INVERSE_ITERATIONS
    lat, lng = gcj02_to_wgs84(coordinate.latitude, coordinate.longitude, iterations=iterations)
    return WGS84Coordinate(latitude=lat, longitude=lng)


def convert_sample(sample: LocationSample) -> LocationSample:
    """将WGS84定位结果转换为GCJ02，保留精度和时间"""
    return LocationSample(
        coordinate=to_gcj02(sample.coordinate),
        horizontal_accuracy=sample.horizontal_accuracy,
        timestamp=sample.timestamp,
    )


class BestLocationCache:
    """最佳位置缓存

    接收设备上报的原始WGS84定位，过滤无效和精度过差的结果，
    每个被接受的定位只做一次GCJ02转换，然后决定是否替换缓存的最佳位置。
    缓存中的位置始终是GCJ02坐标，读取时不再转换。
    """

    def __init__(
        self,
        max_acceptable_accuracy: Optional[float] = None,
        min_accuracy_improvement: Optional[float] = None,
        distance_filter: Optional[float] = None,
    ):
        self.max_acceptable_accuracy = (
            settings.LOCATION_MAX_ACCEPTABLE_ACCURACY
            if max_acceptable_accuracy is None else max_acceptable_accuracy
        )
        self.min_accuracy_improvement = (
            settings.LOCATION_MIN_ACCURACY_IMPROVEMENT
            if min_accuracy_improvement is None else min_accuracy_improvement
        )
        self.distance_filter = (
            settings.LOCATION_DISTANCE_FILTER
            if distance_filter is None else distance_filter
        )
        self._best: Optional[LocationSample] = None
        self._lock = threading.Lock()

    @property
    def current(self) -> Optional[LocationSample]:
        """当前最佳位置（GCJ02），没有时为 None"""
        with self._lock:
            return self._best

    def reset(self) -> None:
        with self._lock:
            self._best = None

    def offer(self, sample: LocationSample) -> LocationUpdate:
        """提交一次原始定位结果

        Args:
            sample: 设备上报的WGS84定位

        Returns:
            LocationUpdate: 处理结果，location 为处理后的当前最佳位置
        """
        if not isinstance(sample.coordinate, WGS84Coordinate):
            raise CoordinateSystemMismatchError(
                "只能提交WGS84原始定位，GCJ02坐标不能再次转换"
            )

        accuracy = sample.horizontal_accuracy
        # NaN 也视为无效
        if not accuracy >= 0:
            logger.warning("定位被拒绝: 精度无效 ({})", accuracy)
            return LocationUpdate(status=LocationUpdateStatus.REJECTED_INVALID, location=self.current)

        if accuracy > self.max_acceptable_accuracy:
            logger.warning("定位被拒绝: 精度过差 ({}m)", accuracy)
            return LocationUpdate(status=LocationUpdateStatus.REJECTED_INACCURATE, location=self.current)

        converted = convert_sample(sample)

        with self._lock:
            cached = self._best
            if cached is None:
                self._best = converted
                logger.info("位置初始化: 精度 {}m (GCJ02)", converted.horizontal_accuracy)
                return LocationUpdate(status=LocationUpdateStatus.INITIALIZED, location=converted)

            improvement = cached.horizontal_accuracy - converted.horizontal_accuracy
            distance = converted.coordinate.distance_to(cached.coordinate)

            if improvement > self.min_accuracy_improvement:
                self._best = converted
                logger.info("位置更新: 精度提升 {:.1f}m (GCJ02)", improvement)
                status = LocationUpdateStatus.ACCURACY_IMPROVED
            elif distance > self.distance_filter and converted.horizontal_accuracy <= cached.horizontal_accuracy:
                self._best = converted
                logger.info("位置更新: 移动 {:.1f}m，精度可接受 (GCJ02)", distance)
                status = LocationUpdateStatus.MOVED
            else:
                logger.debug(
                    "忽略定位: 缓存位置更好 (缓存精度 {}m, 新精度 {}m)",
                    cached.horizontal_accuracy, converted.horizontal_accuracy,
                )
                status = LocationUpdateStatus.IGNORED

            return LocationUpdate(
                status=status,
                location=self._best,
                accuracy_improvement=improvement,
                distance=distance,
            )
