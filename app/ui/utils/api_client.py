"""
FastAPI client wrapper for Streamlit UI.
"""

import os
import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def list_catalog(genre_id: int | None = None, search: str | None = None) -> dict:
    """Get the filtered catalog listing with its genre drop-down data."""
    params = {}
    if genre_id is not None:
        params["genre_id"] = genre_id
    if search:
        params["search"] = search
    r = requests.get(f"{get_api_base_url()}/api/movies", params=params, timeout=10)
    r.raise_for_status()
    return r.json()


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()


def get_news(count: int = 10) -> dict:
    """Get recent news items for the home page."""
    r = requests.get(f"{get_api_base_url()}/api/news", params={"count": count}, timeout=10)
    r.raise_for_status()
    return r.json()
