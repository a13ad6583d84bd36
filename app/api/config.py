"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

CATALOG_SOURCES = ("database", "fake")


def get_database_path() -> str:
    """Get database file path from env or default."""
    return os.getenv("DATABASE_URL", "sqlite:///").replace("sqlite:///", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "movies.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_catalog_source() -> str:
    """Get which movie source backs the listing: 'database' or 'fake'."""
    source = os.getenv("CATALOG_SOURCE", "database").strip().lower()
    if source not in CATALOG_SOURCES:
        raise ValueError(f"CATALOG_SOURCE must be one of {CATALOG_SOURCES}, got {source!r}")
    return source


def get_fake_movie_count() -> int:
    """Get the number of movies in the generated catalog."""
    return int(os.getenv("FAKE_MOVIE_COUNT", "100"))
