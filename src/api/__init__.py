# src/api/__init__.py
from .forecast import (
    DisplayMode as DisplayMode,
    ForecastFetchError as ForecastFetchError,
    HourSample as HourSample,
    fetch_forecast as fetch_forecast,
)
from .geocoding import (
    LocationSearchError as LocationSearchError,
    Place as Place,
    fetch_places as fetch_places,
)
from .wmo_icon_map import WeatherCategory as WeatherCategory, classify_wmo as classify_wmo
