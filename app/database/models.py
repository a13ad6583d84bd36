"""
SQLAlchemy ORM models for the movie catalog database.

This module defines the Genre and Movie tables. A genre groups many movies;
every stored movie references exactly one genre through ``genre_id``.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Genre(Base):
    """
    Genre table used to classify movies.

    Attributes:
        genre_id: Primary key, auto-incremented
        name: Display name of the genre (required)
    """
    __tablename__ = 'genres'

    genre_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)

    # Relationships
    movies: Mapped[List["Movie"]] = relationship(
        "Movie",
        back_populates="genre",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Genre(genre_id={self.genre_id}, name='{self.name}')>"


class Movie(Base):
    """
    Movie table storing the catalog entries.

    Attributes:
        movie_id: Primary key, auto-incremented
        title: Movie title (optional)
        release_date: Date the movie was released
        price: Price with two decimal places
        genre_id: Foreign key to genres table
        plot: Short plot summary (optional)
        poster: Poster image path (optional)
    """
    __tablename__ = 'movies'

    movie_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    genre_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('genres.genre_id', ondelete='CASCADE'),
        nullable=False
    )
    plot: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    poster: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    genre: Mapped[Optional["Genre"]] = relationship("Genre", back_populates="movies")

    # Indexes for common queries
    __table_args__ = (
        Index('idx_movies_title', 'title'),
        Index('idx_movies_genre', 'genre_id'),
    )

    def __repr__(self) -> str:
        return f"<Movie(movie_id={self.movie_id}, title='{self.title}', genre_id={self.genre_id})>"
