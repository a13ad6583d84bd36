"""
System API endpoints (health).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.config import get_catalog_source
from app.api.dependencies import get_db
from app.database import crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: catalog source configured, database reachable and catalog size."""
    try:
        catalog_source = get_catalog_source()
    except ValueError as e:
        logger.warning("Health check failed: %s", e)
        return {"status": "unhealthy", "catalog_source": str(e)}

    try:
        genre_count = crud.get_genre_count(db)
        movie_count = crud.get_movie_count(db)
    except SQLAlchemyError as e:
        logger.warning("Health check failed: %s", e)
        return {"status": "unhealthy", "database": str(e), "catalog_source": catalog_source}
    return {
        "status": "healthy",
        "database": "connected",
        "genres": genre_count,
        "movies": movie_count,
        "catalog_source": catalog_source,
    }
