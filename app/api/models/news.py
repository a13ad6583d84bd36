"""
Pydantic schemas for the recent news API.
"""

from datetime import date

from pydantic import BaseModel


class NewsItemResponse(BaseModel):
    """Response model for a single news item."""

    title: str
    summary: str
    url: str
    image_url: str
    published_on: date

    class Config:
        from_attributes = True


class NewsList(BaseModel):
    """Response model for the recent news panel."""

    items: list[NewsItemResponse]
    total: int
