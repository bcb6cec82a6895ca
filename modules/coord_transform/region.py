from .constants import REGION_MAX_LAT, REGION_MAX_LNG, REGION_MIN_LAT, REGION_MIN_LNG


def is_outside_obfuscation_region(lng, lat) -> bool:
    """
    判断坐标点是否在偏移区域（中国范围矩形）之外

    边界为开区间；任一坐标为 NaN 时比较全部为假，结果视为"区域外"。
    :param lng: 经度（度）
    :param lat: 纬度（度）
    :return: 区域外返回 True，此时不做偏移
    """
    lng = float(lng)
    lat = float(lat)
    return not (
        REGION_MIN_LNG < lng < REGION_MAX_LNG
        and REGION_MIN_LAT < lat < REGION_MAX_LAT
    )
