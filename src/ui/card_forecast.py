# src/ui/card_forecast.py
from __future__ import annotations

import html

import streamlit as st

from src.ui.common import section_title
from src.viewmodels.forecast_rows import HourRow, build_hour_rows
from src.viewmodels.weather_store import FlowStatus, WeatherStore


def hour_row_html(row: HourRow) -> str:
    pop = (
        f"<span class='hour-pop'>{html.escape(row.precip_label)}</span>"
        if row.precip_label is not None
        else ""
    )
    return (
        "<div class='hour-row'>"
        f"<span class='hour-time'>{html.escape(row.time_label)}</span>"
        f"<span class='hour-emoji'>{row.icon}</span>"
        f"<span class='hour-temp'>{html.escape(row.temp_label)}</span>"
        f"{pop}"
        "</div>"
    )


def hour_list_html(rows: list[HourRow]) -> str:
    return "<div class='hour-list'>" + "".join(hour_row_html(r) for r in rows) + "</div>"


def card_forecast(store: WeatherStore) -> None:
    """Render the hourly forecast of the selected place."""
    place = store.place
    if place is None:
        return

    title = f"{html.escape(place.name)}, {html.escape(place.country)} — Next 24 hours"
    section_title(title, mt=16, mb=6)

    if store.forecast_status is FlowStatus.LOADING:
        st.caption("Loading forecast…")
        return

    rows = build_hour_rows(store.hours, store.mode)
    if not rows:
        return
    st.markdown(hour_list_html(rows), unsafe_allow_html=True)
