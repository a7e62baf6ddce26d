"""Streamlit app for working out how many shares to buy to average down."""

import os
import sys

import streamlit as st

from config import get_config
from infra.logging import configure_logging, get_correlation_id, set_correlation_id
from ui.calculator import render_calculator

configure_logging()

st.set_page_config(
    page_title="Average Down Calculator",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# Ensure a stable correlation ID per session for traceable logs
if "correlation_id" not in st.session_state:
    # get_correlation_id() will generate a new one lazily
    st.session_state["correlation_id"] = get_correlation_id()
else:
    set_correlation_id(str(st.session_state["correlation_id"]))

st.header("Average Down Calculator")
st.caption(
    "Find how many shares to buy at a given price to bring your average cost down to a target."
)


def main():
    """Console entry point: launch the Streamlit server for this app."""
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

    import streamlit.web.cli as stcli

    sys.argv = [
        "streamlit",
        "run",
        os.path.join(current_dir, "app.py"),
        "--server.headless=true",
        "--server.port=8501",
        "--browser.gatherUsageStats=false",
    ]
    stcli.main()


def streamlit_main() -> None:
    """Streamlit-specific main function."""
    render_calculator(get_config())


if __name__ == "__main__":
    streamlit_main()
