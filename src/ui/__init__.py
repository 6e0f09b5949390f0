"""Expose the app's render functions."""

from .card_forecast import card_forecast
from .card_header import card_header, card_status
from .card_places import card_places
from .card_search import card_search

__all__ = [
    "card_forecast",
    "card_header",
    "card_places",
    "card_search",
    "card_status",
]
