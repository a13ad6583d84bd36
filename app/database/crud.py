"""
CRUD operations for Genre and Movie models.

This module provides Create, Read, Update, Delete operations for the catalog
tables, plus the eager movie+genre load used by the catalog listing.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.database.models import Genre, Movie


def _check_price(price: Decimal) -> None:
    if price < 0:
        raise ValueError("Price must not be negative")


# ==================== GENRE CRUD OPERATIONS ====================

def create_genre(session: Session, name: str) -> Genre:
    """
    Create a new genre.

    Args:
        session: Database session
        name: Genre name

    Returns:
        Created Genre object

    Raises:
        ValueError: If name is blank
    """
    if not name or not name.strip():
        raise ValueError("Genre name must not be blank")

    genre = Genre(name=name.strip())
    session.add(genre)
    session.commit()
    session.refresh(genre)
    return genre


def get_genre(session: Session, genre_id: int) -> Optional[Genre]:
    """
    Get a genre by ID.

    Args:
        session: Database session
        genre_id: Genre ID

    Returns:
        Genre object or None if not found
    """
    return session.query(Genre).filter(Genre.genre_id == genre_id).first()


def get_genre_by_name(session: Session, name: str) -> Optional[Genre]:
    """Get a genre by its exact name, ignoring surrounding whitespace."""
    return session.query(Genre).filter(Genre.name == name.strip()).first()


def get_genres(
    session: Session,
    skip: int = 0,
    limit: int = 100
) -> List[Genre]:
    """
    Get genres ordered by name, with pagination.

    Args:
        session: Database session
        skip: Number of records to skip
        limit: Maximum number of records to return

    Returns:
        List of Genre objects
    """
    return (
        session.query(Genre)
        .order_by(Genre.name, Genre.genre_id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_genre_count(session: Session) -> int:
    """Get total count of genres."""
    return session.query(func.count(Genre.genre_id)).scalar()


def update_genre(session: Session, genre_id: int, name: str) -> Optional[Genre]:
    """
    Rename a genre.

    Returns:
        Updated Genre object or None if not found

    Raises:
        ValueError: If name is blank
    """
    if not name or not name.strip():
        raise ValueError("Genre name must not be blank")

    genre = get_genre(session, genre_id)
    if genre:
        genre.name = name.strip()
        session.commit()
        session.refresh(genre)
    return genre


def delete_genre(session: Session, genre_id: int) -> bool:
    """
    Delete a genre together with its movies.

    Returns:
        True if genre was deleted, False if not found
    """
    genre = get_genre(session, genre_id)
    if genre:
        session.delete(genre)
        session.commit()
        return True
    return False


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    session: Session,
    title: Optional[str],
    release_date: date,
    price: Decimal,
    genre_id: int,
    plot: Optional[str] = None,
    poster: Optional[str] = None
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        title: Movie title (may be None)
        release_date: Release date
        price: Price, two decimal places
        genre_id: ID of an existing genre
        plot: Plot summary
        poster: Poster image path

    Returns:
        Created Movie object

    Raises:
        ValueError: If price is negative
    """
    _check_price(price)

    movie = Movie(
        title=title,
        release_date=release_date,
        price=price,
        genre_id=genre_id,
        plot=plot,
        poster=poster
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID with its genre loaded.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return (
        session.query(Movie)
        .options(joinedload(Movie.genre))
        .filter(Movie.movie_id == movie_id)
        .first()
    )


def get_movies(
    session: Session,
    skip: int = 0,
    limit: int = 100
) -> List[Movie]:
    """
    Get a list of movies with pagination.

    Args:
        session: Database session
        skip: Number of records to skip
        limit: Maximum number of records to return

    Returns:
        List of Movie objects
    """
    return (
        session.query(Movie)
        .order_by(Movie.movie_id)
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.movie_id)).scalar()


def get_movies_with_genre(session: Session) -> List[Movie]:
    """
    Load every movie with its genre joined in a single query.

    Movies come back in primary key order.

    Args:
        session: Database session

    Returns:
        List of Movie objects with ``genre`` populated
    """
    return (
        session.query(Movie)
        .options(joinedload(Movie.genre))
        .order_by(Movie.movie_id)
        .all()
    )


def update_movie(
    session: Session,
    movie_id: int,
    **kwargs
) -> Optional[Movie]:
    """
    Update movie fields.

    Args:
        session: Database session
        movie_id: Movie ID
        **kwargs: Fields to update (title, release_date, price, genre_id, plot, poster)

    Returns:
        Updated Movie object or None if not found

    Raises:
        ValueError: If the new price is negative
    """
    if kwargs.get('price') is not None:
        _check_price(kwargs['price'])

    movie = get_movie(session, movie_id)
    if movie:
        for key, value in kwargs.items():
            if hasattr(movie, key):
                setattr(movie, key, value)
        session.commit()
        session.refresh(movie)
    return movie


def delete_movie(session: Session, movie_id: int) -> bool:
    """
    Delete a movie.

    Returns:
        True if movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
        return True
    return False
