"""
Streamlit catalog and recent news page for the Movie Catalog.

Run: streamlit run app/ui/app.py --server.port 8501
"""

import requests
import streamlit as st

from app.ui.components.movie_card import render_movie_card
from app.ui.components.news_card import render_news_card
from app.ui.utils.api_client import get_news, health_check, list_catalog
from app.ui.utils.session_state import clear_filters, get_filters, init_session_state

ALL_GENRES = "All genres"

st.set_page_config(
    page_title="Movie Catalog",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 Movie Catalog")

# Check API health
try:
    health = health_check()
    if health.get("status") != "healthy":
        st.warning("API may not be fully ready")
except requests.RequestException as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn app.api.main:app --host 0.0.0.0 --port 8000")
    st.stop()

genre_id, search = get_filters()

try:
    catalog = list_catalog(genre_id=genre_id, search=search or None)
except requests.RequestException as e:
    st.error(f"Could not load the catalog: {e}")
    st.stop()

# The genre list covers the whole catalog, so the options stay stable
# while filters are applied.
genre_names = {g["genre_id"]: g["name"] for g in catalog["genres"]}
options = [None] + sorted(genre_names, key=lambda gid: genre_names[gid])

with st.sidebar:
    st.header("Filter")
    with st.form("catalog_filters"):
        selected = st.selectbox(
            "Genre",
            options,
            index=options.index(genre_id) if genre_id in options else 0,
            format_func=lambda gid: ALL_GENRES if gid is None else genre_names[gid],
        )
        text = st.text_input("Title contains", value=search)
        if st.form_submit_button("Filter"):
            st.session_state["genre_id"] = selected
            st.session_state["search"] = text
            st.rerun()
    if st.button("Clear filters"):
        clear_filters()
        st.rerun()

catalog_tab, news_tab = st.tabs(["Catalog", "Recent news"])

with catalog_tab:
    st.caption(f"{catalog['total']} movies")
    for movie in catalog["movies"]:
        render_movie_card(movie)

with news_tab:
    try:
        news = get_news()
    except requests.RequestException as e:
        st.error(f"Could not load recent news: {e}")
    else:
        for item in news["items"]:
            render_news_card(item)
