from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from src.api.forecast import DisplayMode, HourSample
from src.api.wmo_icon_map import wmo_to_emoji


@dataclass
class HourRow:
    """UI-ready row for one forecast hour."""

    time_label: str  # "14:00"
    icon: str  # weather emoji
    temp_label: str  # "7°" / "—"
    precip_label: str | None  # "40%"; None when the mode hides precipitation


def format_hour(iso_time: str) -> str:
    """'2025-11-11T14:00' → '14:00'. Unparseable input is returned as is."""
    try:
        dt = datetime.fromisoformat(iso_time)
    except (TypeError, ValueError):
        return iso_time
    return dt.strftime("%H:%M")


def format_temperature(temp: float | None) -> str:
    if temp is None or not math.isfinite(temp):
        return "—"
    # half-up, so 2.5 → 3 and -2.5 → -2
    return f"{math.floor(temp + 0.5)}°"


def format_precipitation(sample: HourSample, mode: DisplayMode) -> str | None:
    if not mode.shows_precipitation:
        return None
    pop = sample.precipitation_probability
    return f"{pop if pop is not None else 0}%"


def build_hour_rows(samples: Iterable[HourSample], mode: DisplayMode) -> list[HourRow]:
    return [
        HourRow(
            time_label=format_hour(s.time),
            icon=wmo_to_emoji(s.weather_code),
            temp_label=format_temperature(s.temperature),
            precip_label=format_precipitation(s, mode),
        )
        for s in samples
    ]
