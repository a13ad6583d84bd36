"""
Pydantic schemas for Genre API.
"""

from pydantic import BaseModel, Field


class GenreCreate(BaseModel):
    """Request body for creating or renaming a genre."""

    name: str = Field(..., min_length=1, max_length=60)


class GenreResponse(BaseModel):
    """Response model for a single genre."""

    genre_id: int | None
    name: str

    class Config:
        from_attributes = True


class GenreList(BaseModel):
    """Response model for list of genres with total count."""

    genres: list[GenreResponse]
    total: int
