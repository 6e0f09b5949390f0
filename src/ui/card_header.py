# src/ui/card_header.py
from __future__ import annotations

import html

import streamlit as st

from src.config import APP_SUBTITLE, APP_TITLE, FOOTER_TEXT, HERO_IMAGE_URL
from src.viewmodels.weather_store import WeatherStore


def card_header() -> None:
    """Hero banner, title and subtitle."""
    st.markdown(
        f"""
        <img class="hero" src="{HERO_IMAGE_URL}" alt="" />
        <div class="app-title">{html.escape(APP_TITLE)}</div>
        <div class="app-subtitle">{html.escape(APP_SUBTITLE)}</div>
        """,
        unsafe_allow_html=True,
    )


def card_status(store: WeatherStore) -> None:
    """Show the last flow error (if any) and the footer."""
    if store.error:
        st.markdown(
            f"<div class='app-error'>{html.escape(store.error)}</div>",
            unsafe_allow_html=True,
        )
    st.markdown(
        f"<div class='app-footer'>{html.escape(FOOTER_TEXT)}</div>",
        unsafe_allow_html=True,
    )
