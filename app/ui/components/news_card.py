"""
News item card component.
"""

import streamlit as st


def render_news_card(item: dict) -> None:
    """Render a news item: image, linked title, date and summary."""
    with st.container():
        col1, col2 = st.columns([1, 4])
        with col1:
            st.image(item["image_url"], width="stretch")
        with col2:
            st.markdown(f"**[{item['title']}]({item['url']})**")
            st.caption(item["published_on"])
            st.write(item["summary"])
        st.divider()
