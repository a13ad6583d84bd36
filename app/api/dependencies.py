"""
FastAPI dependency injection for database session and catalog service.
"""

import logging
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.connection import get_db_manager
from app.core.catalog import CatalogQueryService, DatabaseMovieSource, FakeMovieSource
from app.api.config import get_catalog_source, get_database_path, get_fake_movie_count

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        yield session


# Singleton fake source, generated on first use
_fake_source: FakeMovieSource | None = None


def get_fake_source() -> FakeMovieSource:
    """Get or create the singleton generated catalog."""
    global _fake_source
    if _fake_source is None:
        count = get_fake_movie_count()
        logger.info("Generating fake catalog with %d movies", count)
        _fake_source = FakeMovieSource(count=count)
    return _fake_source


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogQueryService:
    """Build the catalog service for the configured movie source."""
    if get_catalog_source() == "fake":
        return CatalogQueryService(get_fake_source())
    return CatalogQueryService(DatabaseMovieSource(db))
