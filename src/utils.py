# src/utils.py
"""General-purpose utility functions for the Aurora Weather application."""

import logging

import streamlit as st

from src.config import DEV

logger = logging.getLogger("auroraweather")


def report_error(ctx: str, e: Exception) -> None:
    """Log errors and, in DEV mode, display them in the Streamlit UI."""
    logger.warning("%s: %s: %s", ctx, type(e).__name__, e)
    if DEV:
        st.caption(f"⚠ {ctx}: {type(e).__name__}: {e}")
