from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import requests

from src.api.geocoding import Place
from src.api.http import http_get_json
from src.api.weather_utils import as_float, as_int, as_str, value_at
from src.config import FORECAST_HOURS, FORECAST_URL

logger = logging.getLogger("auroraweather")


class ForecastFetchError(RuntimeError):
    """Raised when the forecast request fails."""


class DisplayMode(str, Enum):
    BASIC = "basic"
    WITH_PRECIPITATION = "precip"

    @property
    def label(self) -> str:
        return "Temp+Precip" if self is DisplayMode.WITH_PRECIPITATION else "Temp"

    @property
    def shows_precipitation(self) -> bool:
        return self is DisplayMode.WITH_PRECIPITATION


@dataclass(frozen=True)
class HourSample:
    """One hour of forecast data for the selected place."""

    time: str  # ISO local time, e.g. "2025-11-11T14:00"
    temperature: float | None
    weather_code: int | None
    precipitation_probability: int | None = None


def hourly_fields(mode: DisplayMode) -> str:
    """Comma-separated Open-Meteo hourly variables for the given mode."""
    if mode.shows_precipitation:
        return "temperature_2m,precipitation_probability,weathercode"
    return "temperature_2m,weathercode"


def build_forecast_params(place: Place, mode: DisplayMode) -> dict[str, Any]:
    return {
        "latitude": place.latitude,
        "longitude": place.longitude,
        "hourly": hourly_fields(mode),
        "timezone": "auto",
    }


def parse_hourly(payload: Any, limit: int = FORECAST_HOURS) -> list[HourSample]:
    """
    Zip Open-Meteo's parallel hourly arrays into samples.

    The `time` array drives the sequence; it is cut to the first `limit`
    entries. Values missing from the other arrays become None.
    """
    hourly = payload.get("hourly") if isinstance(payload, dict) else None
    if not isinstance(hourly, dict):
        return []

    times: list[Any] = hourly.get("time") or []
    temps: list[Any] = hourly.get("temperature_2m") or []
    codes: list[Any] = hourly.get("weathercode") or []
    pops: list[Any] = hourly.get("precipitation_probability") or []

    samples: list[HourSample] = []
    for idx, raw_time in enumerate(times[:limit]):
        samples.append(
            HourSample(
                time=as_str(raw_time) or "",
                temperature=as_float(value_at(temps, idx)),
                weather_code=as_int(value_at(codes, idx)),
                precipitation_probability=as_int(value_at(pops, idx)),
            )
        )

    return samples


def fetch_forecast(place: Place, mode: DisplayMode) -> list[HourSample]:
    """Fetch the next hours of forecast for `place` with the fields `mode` needs."""
    try:
        payload = http_get_json(FORECAST_URL, params=build_forecast_params(place, mode))
    except requests.RequestException as err:
        raise ForecastFetchError(f"forecast failed for {place.label}") from err

    try:
        samples = parse_hourly(payload)
    except (TypeError, ValueError, AttributeError) as err:
        raise ForecastFetchError(f"unexpected forecast response for {place.label}") from err
    logger.info("Forecast %s (%s) -> %d hours", place.label, mode.value, len(samples))
    return samples
