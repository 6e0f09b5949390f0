# tests/test_wmo_icon_map.py
import src.api.wmo_icon_map as w
from src.api.wmo_icon_map import WeatherCategory as C


def test_classify_known_codes():
    assert w.classify_wmo(0) is C.CLEAR
    assert w.classify_wmo(2) is C.PARTLY_CLOUDY
    assert w.classify_wmo(3) is C.OVERCAST
    assert w.classify_wmo(48) is C.FOG
    assert w.classify_wmo(57) is C.DRIZZLE
    assert w.classify_wmo(66) is C.RAIN
    assert w.classify_wmo(82) is C.RAIN
    assert w.classify_wmo(77) is C.SNOW
    assert w.classify_wmo(99) is C.THUNDERSTORM


def test_classify_unknown_and_none():
    assert w.classify_wmo(4) is C.UNKNOWN
    assert w.classify_wmo(-1) is C.UNKNOWN
    assert w.classify_wmo(10_000) is C.UNKNOWN
    assert w.classify_wmo(None) is C.UNKNOWN


def test_classifier_is_total_and_deterministic():
    for code in range(-5, 200):
        first = w.classify_wmo(code)
        assert first in C
        assert w.classify_wmo(code) is first
    assert len(C) == 9


def test_wmo_to_emoji():
    assert w.wmo_to_emoji(0) == "☀️"
    assert w.wmo_to_emoji(95) == "⛈️"
    assert w.wmo_to_emoji(None) == "🌀"
