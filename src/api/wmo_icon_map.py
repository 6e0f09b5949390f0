from __future__ import annotations

from enum import Enum
from typing import Final


class WeatherCategory(Enum):
    """Coarse weather categories shown in the hourly list."""

    CLEAR = ("clear", "☀️")
    PARTLY_CLOUDY = ("partly-cloudy", "🌤️")
    OVERCAST = ("overcast", "☁️")
    FOG = ("fog", "🌫️")
    DRIZZLE = ("drizzle", "🌦️")
    RAIN = ("rain", "🌧️")
    SNOW = ("snow", "❄️")
    THUNDERSTORM = ("thunderstorm", "⛈️")
    UNKNOWN = ("unknown", "🌀")

    def __init__(self, key: str, emoji: str) -> None:
        self.key = key
        self.emoji = emoji


# WMO code → category
_CATEGORY_BY_WMO: Final[dict[int, WeatherCategory]] = {
    0: WeatherCategory.CLEAR,
    1: WeatherCategory.PARTLY_CLOUDY,
    2: WeatherCategory.PARTLY_CLOUDY,
    3: WeatherCategory.OVERCAST,
    45: WeatherCategory.FOG,
    48: WeatherCategory.FOG,
    51: WeatherCategory.DRIZZLE,
    53: WeatherCategory.DRIZZLE,
    55: WeatherCategory.DRIZZLE,
    56: WeatherCategory.DRIZZLE,
    57: WeatherCategory.DRIZZLE,
    61: WeatherCategory.RAIN,
    63: WeatherCategory.RAIN,
    65: WeatherCategory.RAIN,
    66: WeatherCategory.RAIN,
    67: WeatherCategory.RAIN,
    80: WeatherCategory.RAIN,
    81: WeatherCategory.RAIN,
    82: WeatherCategory.RAIN,
    71: WeatherCategory.SNOW,
    73: WeatherCategory.SNOW,
    75: WeatherCategory.SNOW,
    77: WeatherCategory.SNOW,
    85: WeatherCategory.SNOW,
    86: WeatherCategory.SNOW,
    95: WeatherCategory.THUNDERSTORM,
    96: WeatherCategory.THUNDERSTORM,
    99: WeatherCategory.THUNDERSTORM,
}


def classify_wmo(code: int | None) -> WeatherCategory:
    """Map a WMO weather code to its category; unknown codes and None → UNKNOWN."""
    if code is None:
        return WeatherCategory.UNKNOWN
    return _CATEGORY_BY_WMO.get(code, WeatherCategory.UNKNOWN)


def wmo_to_emoji(code: int | None) -> str:
    return classify_wmo(code).emoji
