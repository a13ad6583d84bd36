"""
Pydantic schemas for Movie API.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from app.api.models.genre import GenreResponse


class MovieCreate(BaseModel):
    """Request body for creating a movie."""

    title: str | None = Field(None, max_length=200)
    release_date: date
    price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    genre_id: int
    plot: str | None = None
    poster: str | None = None


class MovieUpdate(BaseModel):
    """Request body for updating a movie (all fields optional)."""

    title: str | None = Field(None, max_length=200)
    release_date: date | None = None
    price: Decimal | None = Field(None, ge=0, max_digits=18, decimal_places=2)
    genre_id: int | None = None
    plot: str | None = None
    poster: str | None = None


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    movie_id: int | None
    title: str | None
    release_date: date
    price: Decimal
    genre_id: int | None
    genre: GenreResponse | None = None
    plot: str | None = None
    poster: str | None = None

    class Config:
        from_attributes = True


class CatalogResponse(BaseModel):
    """Response model for the filtered catalog listing."""

    movies: list[MovieResponse]
    genres: list[GenreResponse]
    genre_id: int | None = None
    search: str | None = None
    total: int
