"""Map Open-Meteo WMO weather codes to display icon categories."""

from weatherapp.models.common import IconCategory

# https://open-meteo.com/en/docs (WMO weather interpretation codes)
_CODE_CATEGORIES: dict[int, IconCategory] = {
    0: IconCategory.CLEAR,
    1: IconCategory.CLEAR,
    2: IconCategory.PARTLY_CLOUDY,
    3: IconCategory.CLOUDY,
    45: IconCategory.FOG,
    48: IconCategory.FOG,
    51: IconCategory.DRIZZLE,
    53: IconCategory.DRIZZLE,
    55: IconCategory.RAIN,
    61: IconCategory.RAIN,
    63: IconCategory.HEAVY_RAIN,
    65: IconCategory.HEAVY_RAIN,
    80: IconCategory.HEAVY_RAIN,
    81: IconCategory.HEAVY_RAIN,
    82: IconCategory.HEAVY_RAIN,
    56: IconCategory.HAIL,
    57: IconCategory.HAIL,
    66: IconCategory.HAIL,
    67: IconCategory.HAIL,
    71: IconCategory.SNOW,
    73: IconCategory.SNOW,
    75: IconCategory.SNOW,
    77: IconCategory.SNOW,
    85: IconCategory.SNOW,
    86: IconCategory.SNOW,
    95: IconCategory.THUNDERSTORM,
    96: IconCategory.THUNDERSTORM,
    99: IconCategory.THUNDERSTORM,
}


def classify(code: int) -> IconCategory:
    """Return the icon category for a weather code.

    Total: unmapped or non-integer codes yield IconCategory.UNKNOWN.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return IconCategory.UNKNOWN
    return _CODE_CATEGORIES.get(code, IconCategory.UNKNOWN)
