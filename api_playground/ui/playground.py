"""Streamlit UI for the API playground page."""
from __future__ import annotations

import streamlit as st

from api_playground.config.settings import SETTINGS, AppSettings
from api_playground.features.registry import FEATURES, setup_features
from api_playground.ui.streamlit_page import StreamlitPage


def render_playground(settings: AppSettings = SETTINGS) -> None:
    """Render every enabled feature card and run the one that was clicked."""

    st.title("🧪 API Playground")
    st.markdown("Small demos of free public APIs. Each card makes a fresh request when clicked.")

    enabled = [feature for feature in FEATURES if settings.is_enabled(feature.key)]
    if not enabled:
        st.warning("No features enabled. Check ENABLED_FEATURES in your `.env` file.")
        return

    if not settings.tmdb_api_key and any(feature.key == "tmdb" for feature in enabled):
        st.caption("ℹ️ Trending Movies needs `TMDB_API_KEY` in your `.env` file.")

    page = StreamlitPage()
    page.layout(enabled)
    setup_features(page, enabled, settings)
    page.dispatch()
