# src/ui/card_places.py
from __future__ import annotations

import streamlit as st

from src.ui.common import section_title
from src.viewmodels.weather_store import FlowStatus, WeatherStore


def card_places(store: WeatherStore) -> None:
    """Candidate places from the last search; clicking one loads its forecast."""
    if store.search_status is FlowStatus.LOADING:
        st.caption("Searching…")
        return
    if not store.places:
        return

    section_title("Select a place", mt=14, mb=4)
    for idx, place in enumerate(store.places):
        if st.button(place.name, key=f"place_{idx}_{place.id}"):
            with st.spinner("Loading forecast…"):
                store.select_place(place)
        st.caption(place.meta)
