# src/ui/card_search.py
from __future__ import annotations

import streamlit as st

from src.api.forecast import DisplayMode
from src.config import SEARCH_PLACEHOLDER
from src.viewmodels.weather_store import WeatherStore

QUERY_KEY = "search_query"
RECENT_PER_ROW = 4
MODES: tuple[DisplayMode, ...] = (DisplayMode.BASIC, DisplayMode.WITH_PRECIPITATION)


def _search_recent(store: WeatherStore, query: str) -> None:
    # runs as a button callback, before the text input is drawn again
    st.session_state[QUERY_KEY] = query
    store.search(query)


def card_search(store: WeatherStore) -> None:
    """Search box, hourly mode selector and recent-search chips."""
    with st.form("search_form", clear_on_submit=False):
        col_input, col_button = st.columns([4, 1], gap="small")
        with col_input:
            text = st.text_input(
                "City",
                key=QUERY_KEY,
                placeholder=SEARCH_PLACEHOLDER,
                label_visibility="collapsed",
            )
        with col_button:
            submitted = st.form_submit_button("Search")

    if submitted:
        with st.spinner("Searching…"):
            store.search(text)

    mode = st.radio(
        "Hourly mode",
        options=MODES,
        index=MODES.index(store.mode),
        format_func=lambda m: m.label,
        horizontal=True,
        key="hourly_mode",
    )
    if mode != store.mode:
        with st.spinner("Loading forecast…"):
            store.set_mode(mode)

    recent = store.recent.items()
    if recent:
        cols = st.columns(min(len(recent), RECENT_PER_ROW), gap="small")
        for idx, item in enumerate(recent):
            with cols[idx % len(cols)]:
                st.button(
                    item,
                    key=f"recent_{idx}_{item}",
                    on_click=_search_recent,
                    args=(store, item),
                )
