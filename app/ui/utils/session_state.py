"""
Session state helpers for Streamlit.
"""

import streamlit as st


def get_filters() -> tuple[int | None, str]:
    """Get the current (genre_id, search) filters."""
    return st.session_state.get("genre_id"), st.session_state.get("search", "")


def clear_filters() -> None:
    """Reset both filters."""
    st.session_state["genre_id"] = None
    st.session_state["search"] = ""


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "genre_id" not in st.session_state:
        st.session_state["genre_id"] = None
    if "search" not in st.session_state:
        st.session_state["search"] = ""
