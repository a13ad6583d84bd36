"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.genre import GenreCreate, GenreResponse, GenreList
from app.api.models.movie import MovieCreate, MovieUpdate, MovieResponse, CatalogResponse
from app.api.models.news import NewsItemResponse, NewsList

__all__ = [
    "GenreCreate",
    "GenreResponse",
    "GenreList",
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "CatalogResponse",
    "NewsItemResponse",
    "NewsList",
]
