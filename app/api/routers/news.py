"""
Recent news API endpoint.
"""

from fastapi import APIRouter, Query

from app.api.models.news import NewsItemResponse, NewsList
from app.core.catalog import generate_news

router = APIRouter(prefix="/api/news", tags=["news"])


@router.get("", response_model=NewsList)
def list_news(count: int = Query(10, ge=1, le=50)):
    """Recent news for the home page, newest first. Regenerated on every request."""
    items = generate_news(count=count)
    return NewsList(
        items=[NewsItemResponse.model_validate(item) for item in items],
        total=len(items),
    )
