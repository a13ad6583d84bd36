"""
Movie catalog listing.

This package contains:
- The listing pipeline (search and genre filters, genre drop-down data)
- Movie sources (database, in-memory, generated demo data)
- Generated recent news items
- The DataAccessFailure error
"""

from app.core.catalog.errors import DataAccessFailure
from app.core.catalog.query import (
    CatalogQueryService,
    FilterCriteria,
    QueryResult,
    collect_genres,
    filter_by_genre,
    filter_by_title,
    list_movies,
)
from app.core.catalog.sources import DatabaseMovieSource, InMemoryMovieSource, MovieSource
from app.core.catalog.fake import FakeMovieSource, NewsItem, generate_catalog, generate_news

__all__ = [
    'CatalogQueryService',
    'DataAccessFailure',
    'DatabaseMovieSource',
    'FakeMovieSource',
    'FilterCriteria',
    'InMemoryMovieSource',
    'MovieSource',
    'NewsItem',
    'QueryResult',
    'collect_genres',
    'filter_by_genre',
    'filter_by_title',
    'generate_catalog',
    'generate_news',
    'list_movies',
]
