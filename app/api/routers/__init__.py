"""
API route handlers.
"""

from app.api.routers import genres, movies, news, system

__all__ = ["genres", "movies", "news", "system"]
