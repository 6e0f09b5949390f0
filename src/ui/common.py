# src/ui/common.py
from __future__ import annotations

import streamlit as st

from src.paths import asset_path
from src.viewmodels.weather_store import WeatherStore

STORE_KEY = "weather_store"


def load_css(file_name: str) -> None:
    path = asset_path(file_name)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as f:
        st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


def section_title(html: str, mt: int = 10, mb: int = 10) -> None:
    """Render a section title with customizable margins.

    Args:
        html: HTML content for the title.
        mt: Top margin in pixels (default: 10).
        mb: Bottom margin in pixels (default: 10).
    """
    st.markdown(
        f"<div class='section-title' style='margin:{mt}px 0 {mb}px 0'>{html}</div>",
        unsafe_allow_html=True,
    )


def get_store() -> WeatherStore:
    """Return the session's WeatherStore, creating it on the first run."""
    store = st.session_state.get(STORE_KEY)
    if not isinstance(store, WeatherStore):
        store = WeatherStore()
        st.session_state[STORE_KEY] = store
    return store
