# config.py
"""Configuration settings for the Aurora Weather application."""

import os

HTTP_TIMEOUT_S: float = 8.0
USER_AGENT: str = "AuroraWeather/1.0 (+https://open-meteo.com)"

DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- OPEN-METEO ENDPOINTS -------------------

GEOCODING_URL: str = os.getenv(
    "AURORA_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
)
"""Location search endpoint (free-text city name → candidate places)."""

FORECAST_URL: str = os.getenv("AURORA_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
"""Hourly forecast endpoint (latitude/longitude → parallel hourly arrays)."""

GEOCODING_COUNT: int = 5
"""Maximum number of candidate places requested per search."""

GEOCODING_LANGUAGE: str = "en"

FORECAST_HOURS: int = 24
"""Number of hourly samples shown for the selected place."""

# ------------------- RECENT SEARCHES -------------------

RECENT_LIMIT: int = 8
DEFAULT_RECENT: tuple[str, ...] = ("Hamilton", "Toronto", "New York")
"""Chips shown before the user has searched anything."""

# ------------------- UI TEXTS -------------------

APP_TITLE: str = "Aurora Weather"
APP_SUBTITLE: str = "Fast hourly weather for any city. Type a city and pick a result."
HERO_IMAGE_URL: str = (
    "https://images.unsplash.com/photo-1499346030926-9a72daac6c63"
    "?q=80&w=1200&auto=format&fit=crop"
)
SEARCH_PLACEHOLDER: str = "Search city… (e.g., Hamilton)"
FOOTER_TEXT: str = "Built with Streamlit and Open-Meteo APIs."

SEARCH_FAILED_MSG: str = "City search failed. Check your connection or try a different name."
FORECAST_FAILED_MSG: str = "Could not load forecast. Please try again."
