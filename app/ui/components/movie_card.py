"""
Movie display card component.
"""

import streamlit as st

POSTER_BASE_URL = "https://image.tmdb.org/t/p/w200"


def render_movie_card(movie: dict) -> None:
    """
    Render a movie card.

    Args:
        movie: Movie as returned by the catalog API (title, genre,
            release_date, price, plot, poster)
    """
    genre = movie.get("genre") or {}
    with st.container():
        col1, col2 = st.columns([1, 4])
        with col1:
            if movie.get("poster"):
                st.image(f"{POSTER_BASE_URL}{movie['poster']}", width="stretch")
        with col2:
            st.markdown(f"**{movie.get('title') or 'Untitled'}**")
            meta = [movie.get("release_date") or ""]
            if genre.get("name"):
                meta.append(genre["name"])
            meta.append(f"${movie.get('price')}")
            st.caption(" | ".join(m for m in meta if m))
            if movie.get("plot"):
                st.write(movie["plot"])
        st.divider()
