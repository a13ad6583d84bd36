"""
Catalog listing query.

Builds the data behind the movie index page: the list of movies matching the
caller's filters, and the genres to offer in the filter drop-down.

The listing is an explicit pipeline over plain lists:

    fetch -> collect genres -> filter by title -> filter by genre

Genres are collected from the full fetch *before* any filter runs, so the
drop-down keeps offering every genre in the catalog even when the current
filters leave some of them with no movies.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from app.core.catalog.sources import MovieSource
from app.database.models import Genre, Movie

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Optional filters for a single listing request.

    Attributes:
        genre_id: Keep only movies with this genre ID. ``None`` means no
            genre filter; ``0`` is an ordinary ID.
        search: Keep only movies whose title contains this text
            (case-sensitive). ``None``, empty and whitespace-only strings
            mean no title filter.
    """
    genre_id: Optional[int] = None
    search: Optional[str] = None

    @property
    def has_search(self) -> bool:
        return bool(self.search and self.search.strip())


@dataclass
class QueryResult:
    """
    Result of a listing request.

    Attributes:
        movies: Movies left after filtering, in source order
        genres: Distinct genres of the unfiltered catalog, first-seen order
    """
    movies: List[Movie] = field(default_factory=list)
    genres: List[Genre] = field(default_factory=list)


def _genre_key(genre: Genre):
    # Transient genres may not have an ID yet; fall back to object identity.
    if genre.genre_id is not None:
        return ('id', genre.genre_id)
    return ('obj', id(genre))


def collect_genres(movies: Iterable[Movie]) -> List[Genre]:
    """
    Collect the distinct genres referenced by ``movies``.

    Movies without a loaded genre are skipped. Order is first appearance.
    """
    seen = set()
    genres: List[Genre] = []
    for movie in movies:
        genre = movie.genre
        if genre is None:
            continue
        key = _genre_key(genre)
        if key in seen:
            continue
        seen.add(key)
        genres.append(genre)
    return genres


def filter_by_title(movies: Iterable[Movie], search: str) -> List[Movie]:
    """Keep movies whose title contains ``search``; untitled movies never match."""
    return [m for m in movies if m.title is not None and search in m.title]


def filter_by_genre(movies: Iterable[Movie], genre_id: int) -> List[Movie]:
    """Keep movies whose ``genre_id`` equals ``genre_id``."""
    return [m for m in movies if m.genre_id == genre_id]


async def list_movies(source: MovieSource, criteria: Optional[FilterCriteria] = None) -> QueryResult:
    """
    Run the catalog listing pipeline.

    Args:
        source: Where movies (with their genres) are fetched from
        criteria: Optional filters; ``None`` lists everything

    Returns:
        QueryResult with filtered movies and the unfiltered genre list

    Raises:
        DataAccessFailure: If the source fails; nothing is filtered
    """
    criteria = criteria or FilterCriteria()

    movies = list(await source.fetch_all_movies_with_genre())
    genres = collect_genres(movies)

    if criteria.has_search:
        movies = filter_by_title(movies, criteria.search)

    if criteria.genre_id is not None:
        movies = filter_by_genre(movies, criteria.genre_id)

    logger.debug(
        "Catalog listing (genre_id=%s, search=%r): %d movies, %d genres",
        criteria.genre_id, criteria.search, len(movies), len(genres)
    )
    return QueryResult(movies=movies, genres=genres)


class CatalogQueryService:
    """
    Catalog listing bound to a movie source.

    Usage:
        service = CatalogQueryService(DatabaseMovieSource(session))
        result = await service.list_movies(FilterCriteria(search="Dune"))
    """

    def __init__(self, source: MovieSource):
        self.source = source

    async def list_movies(self, criteria: Optional[FilterCriteria] = None) -> QueryResult:
        """List movies from the bound source. See ``list_movies``."""
        return await list_movies(self.source, criteria)
