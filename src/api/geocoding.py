# src/api/geocoding.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from src.api.http import http_get_json
from src.api.weather_utils import as_float, as_str
from src.config import GEOCODING_COUNT, GEOCODING_LANGUAGE, GEOCODING_URL

logger = logging.getLogger("auroraweather")


class LocationSearchError(RuntimeError):
    """Raised when the location search request fails."""


@dataclass(frozen=True)
class Place:
    """A candidate location returned by Open-Meteo geocoding."""

    id: str
    name: str
    country: str
    latitude: float
    longitude: float

    @property
    def label(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name

    @property
    def meta(self) -> str:
        """e.g. 'Canada · 43.26, -79.87'"""
        return f"{self.country} · {self.latitude:.2f}, {self.longitude:.2f}"


def build_search_params(query: str) -> dict[str, Any]:
    return {
        "name": query,
        "count": GEOCODING_COUNT,
        "language": GEOCODING_LANGUAGE,
        "format": "json",
    }


def _parse_place(raw: dict[str, Any]) -> Place | None:
    lat = as_float(raw.get("latitude"))
    lon = as_float(raw.get("longitude"))
    if lat is None or lon is None:
        return None

    return Place(
        id=as_str(raw.get("id")) or "",
        name=as_str(raw.get("name")) or "",
        country=as_str(raw.get("country")) or "",
        latitude=lat,
        longitude=lon,
    )


def parse_places(payload: Any) -> list[Place]:
    """Turn a geocoding response into places, keeping the server order."""
    if not isinstance(payload, dict):
        return []

    results = payload.get("results") or []
    places: list[Place] = []
    for raw in results:
        if not isinstance(raw, dict):
            continue
        place = _parse_place(raw)
        if place is None:
            # no usable coordinates
            continue
        places.append(place)

    return places[:GEOCODING_COUNT]


def fetch_places(query: str) -> list[Place]:
    """Search places matching `query` (already trimmed, non-empty)."""
    try:
        payload = http_get_json(GEOCODING_URL, params=build_search_params(query))
    except requests.RequestException as err:
        raise LocationSearchError(f"location search failed for {query!r}") from err

    try:
        places = parse_places(payload)
    except (TypeError, ValueError, AttributeError) as err:
        raise LocationSearchError(f"unexpected location search response for {query!r}") from err
    logger.info("Location search %r -> %d candidates", query, len(places))
    return places
