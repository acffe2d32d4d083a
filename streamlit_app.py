import logging

import streamlit as st

from api_playground.config.settings import SETTINGS
from api_playground.ui.playground import render_playground

logging.basicConfig(level=getattr(logging, SETTINGS.log_level, logging.INFO))
# Suppress connection-pool chatter
logging.getLogger("urllib3").setLevel(logging.WARNING)


def main():
    st.set_page_config(
        page_title="API Playground",
        page_icon="🧪",
        layout="wide",
    )

    st.markdown("""
    <style>
    div[data-testid="stCaptionContainer"] { color: #666; }
    </style>
    """, unsafe_allow_html=True)

    render_playground()


if __name__ == "__main__":
    main()
