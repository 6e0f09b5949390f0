# main.py
"""Main entry point for the Aurora Weather Streamlit application."""

import sys
import traceback

import streamlit as st

from src.config import APP_TITLE
from src.logger_config import setup_logging
from src.paths import ensure_dirs
from src.ui import card_forecast, card_header, card_places, card_search, card_status
from src.ui.common import get_store, load_css

ensure_dirs()

logger = setup_logging()


def main() -> None:
    """Initialize and render the Aurora Weather layout."""
    try:
        st.set_page_config(
            page_title=APP_TITLE,
            layout="centered",
            page_icon="🌤️",
        )
        load_css("style.css")

        store = get_store()

        card_header()
        card_search(store)
        card_places(store)
        card_forecast(store)
        card_status(store)

    except KeyboardInterrupt:
        logger.info("Aurora Weather shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        st.error("Something went wrong. Please reload the page.")


if __name__ == "__main__":
    main()
