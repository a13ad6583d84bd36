"""
Movie sources for the catalog listing.

A source hands back every movie with its genre attached. The listing never
talks to the database directly, so the same pipeline runs against SQLite,
a fixed list, or generated demo data.
"""

import logging
from typing import Iterable, List, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from app.core.catalog.errors import DataAccessFailure
from app.database import crud
from app.database.models import Movie

logger = logging.getLogger(__name__)


class MovieSource(Protocol):
    """Anything that can asynchronously fetch all movies with genres joined."""

    async def fetch_all_movies_with_genre(self) -> List[Movie]:
        ...


class DatabaseMovieSource:
    """
    Movie source backed by a SQLAlchemy session.

    The blocking query runs in the Starlette thread pool so the event loop
    stays free while SQLite works.
    """

    def __init__(self, session: Session):
        self.session = session

    async def fetch_all_movies_with_genre(self) -> List[Movie]:
        try:
            return await run_in_threadpool(crud.get_movies_with_genre, self.session)
        except SQLAlchemyError as e:
            logger.error("Failed to load movies from database: %s", e)
            raise DataAccessFailure("Could not load movies from the database") from e


class InMemoryMovieSource:
    """Movie source serving a fixed list of movies."""

    def __init__(self, movies: Iterable[Movie] = ()):
        self.movies = list(movies)

    async def fetch_all_movies_with_genre(self) -> List[Movie]:
        return list(self.movies)
