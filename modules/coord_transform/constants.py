"""
坐标转换常量

两套地球半径互不通用：
- RADIUS / EE 为 GCJ-02 偏移算法使用的克拉索夫斯基椭球参数；
- MERCATOR_RADIUS 为 Web Mercator 球面投影使用的 WGS84 长半轴。
"""

import math

# GCJ-02 偏移算法（克拉索夫斯基1940椭球）
RADIUS = 6378245.0  # 长半轴
EE = 0.00669342162296594323  # 偏心率平方

# GCJ-02 <-> BD-09
X_PI = math.pi * 3000.0 / 180.0
BD_LNG_OFFSET = 0.0065
BD_LAT_OFFSET = 0.006

# 偏移区域（开区间）
REGION_MIN_LNG = 73.66
REGION_MAX_LNG = 135.05
REGION_MIN_LAT = 3.86
REGION_MAX_LAT = 53.55

# 球面 Web Mercator
MERCATOR_RADIUS = 6378137.0
MERCATOR_MAX_LATITUDE = 85.05112877980659  # 投影正方形边界对应的纬度
MERCATOR_XY_DIGITS = 2  # 米
MERCATOR_LNGLAT_DIGITS = 6  # 度
