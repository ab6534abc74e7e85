# 系统常量定义
from enum import Enum

# 克拉索夫斯基1940椭球体参数（国测局偏移标准使用）
ELLIPSOID_A = 6378245.0  # 长半轴（米）
ELLIPSOID_EE = 0.00669342162296594323  # 第一偏心率平方

# 偏移模型的中心参考点（中国地理中心附近）
REFERENCE_LATITUDE = 35.0
REFERENCE_LONGITUDE = 105.0

# 中国大陆粗略范围（矩形，包含边界）
REGION_MIN_LATITUDE = 18.0
REGION_MAX_LATITUDE = 54.0
REGION_MIN_LONGITUDE = 73.0
REGION_MAX_LONGITUDE = 135.0

# 逆变换默认迭代次数（与参考实现保持一致）
INVERSE_ITERATIONS = 2

# 地球平均半径（米），用于大圆距离
EARTH_MEAN_RADIUS = 6371000.0


# 坐标系统枚举
class CoordinateSystem(str, Enum):
    WGS84 = "wgs84"
    GCJ02 = "gcj02"
