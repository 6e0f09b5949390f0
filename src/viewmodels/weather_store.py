from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from src.api.forecast import DisplayMode, ForecastFetchError, HourSample, fetch_forecast
from src.api.geocoding import LocationSearchError, Place, fetch_places
from src.config import DEFAULT_RECENT, FORECAST_FAILED_MSG, SEARCH_FAILED_MSG
from src.viewmodels.recent_queries import RecentQueries

logger = logging.getLogger("auroraweather")

SearchFn = Callable[[str], list[Place]]
ForecastFn = Callable[[Place, DisplayMode], list[HourSample]]


class FlowStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


def _default_recent() -> RecentQueries:
    return RecentQueries(DEFAULT_RECENT)


@dataclass
class WeatherStore:
    """
    Single owner of the app's UI state.

    Both flows run in two phases: `begin_*` tags the attempt with a request
    token, `finish_*` / `fail_*` apply the outcome only when that token is
    still the latest one for the flow. A response that arrives after a newer
    attempt has started is dropped.
    """

    search_fn: SearchFn = field(default=fetch_places, repr=False)
    forecast_fn: ForecastFn = field(default=fetch_forecast, repr=False)

    query: str = ""
    recent: RecentQueries = field(default_factory=_default_recent)
    mode: DisplayMode = DisplayMode.BASIC
    places: list[Place] = field(default_factory=list)
    place: Place | None = None
    hours: list[HourSample] = field(default_factory=list)
    search_status: FlowStatus = FlowStatus.IDLE
    forecast_status: FlowStatus = FlowStatus.IDLE
    error: str = ""

    _search_token: int = field(default=0, init=False, repr=False)
    _forecast_token: int = field(default=0, init=False, repr=False)

    # --- location search --------------------------------------------------------

    def begin_search(self, text: str | None = None) -> tuple[int, str] | None:
        """Start a search; returns (token, trimmed query) or None for empty input."""
        q = (self.query if text is None else text).strip()
        if not q:
            return None

        self._search_token += 1
        self.query = q
        self.error = ""
        self.places = []
        self.search_status = FlowStatus.LOADING
        return self._search_token, q

    def finish_search(self, token: int, query: str, places: list[Place]) -> bool:
        if token != self._search_token:
            logger.debug("Dropping stale search result %s (latest %s)", token, self._search_token)
            return False
        self.places = list(places)
        self.recent.add(query)
        self.search_status = FlowStatus.SUCCESS
        return True

    def fail_search(self, token: int) -> bool:
        if token != self._search_token:
            logger.debug("Dropping stale search failure %s (latest %s)", token, self._search_token)
            return False
        self.places = []
        self.error = SEARCH_FAILED_MSG
        self.search_status = FlowStatus.ERROR
        return True

    def search(self, text: str | None = None) -> None:
        """Run the whole search flow; errors end up in `self.error`."""
        started = self.begin_search(text)
        if started is None:
            return
        token, q = started
        logger.info("Searching places for %r", q)
        try:
            places = self.search_fn(q)
        except LocationSearchError as err:
            logger.warning("Location search failed: %s", err)
            self.fail_search(token)
            return
        self.finish_search(token, q, places)

    # --- forecast ---------------------------------------------------------------

    def begin_forecast(self, place: Place) -> int:
        self._forecast_token += 1
        self.error = ""
        self.place = place
        self.hours = []
        self.forecast_status = FlowStatus.LOADING
        return self._forecast_token

    def finish_forecast(self, token: int, hours: list[HourSample]) -> bool:
        if token != self._forecast_token:
            logger.debug(
                "Dropping stale forecast result %s (latest %s)", token, self._forecast_token
            )
            return False
        self.hours = list(hours)
        self.forecast_status = FlowStatus.SUCCESS
        return True

    def fail_forecast(self, token: int) -> bool:
        if token != self._forecast_token:
            logger.debug(
                "Dropping stale forecast failure %s (latest %s)", token, self._forecast_token
            )
            return False
        self.hours = []
        self.error = FORECAST_FAILED_MSG
        self.forecast_status = FlowStatus.ERROR
        return True

    def select_place(self, place: Place) -> None:
        """Fetch the forecast for `place` with the current mode."""
        token = self.begin_forecast(place)
        mode = self.mode
        logger.info("Fetching forecast for %s (%s)", place.label, mode.value)
        try:
            hours = self.forecast_fn(place, mode)
        except ForecastFetchError as err:
            logger.warning("Forecast fetch failed: %s", err)
            self.fail_forecast(token)
            return
        self.finish_forecast(token, hours)

    def set_mode(self, mode: DisplayMode) -> None:
        """Switch display mode; refetches the selected place when the mode changes."""
        mode = DisplayMode(mode)
        if mode == self.mode:
            return
        self.mode = mode
        if self.place is not None:
            self.select_place(self.place)
