"""
FastAPI application entry point for the Movie Catalog API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.config import get_api_host, get_api_port, get_database_path, get_log_level
from app.api.routers import genres, movies, news, system
from app.core.catalog import DataAccessFailure
from app.database import init_database
from app.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and make sure the catalog tables exist."""
    configure_api_logging(level=get_log_level())
    init_database(db_path=get_database_path())
    logger.info("Movie Catalog API ready")
    yield


app = FastAPI(
    title="Movie Catalog API",
    description="REST API for browsing and managing a movie catalog by genre",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(genres.router)
app.include_router(news.router)
app.include_router(system.router)


@app.exception_handler(DataAccessFailure)
async def data_access_failure_handler(request: Request, exc: DataAccessFailure):
    """Report an unreachable data source as 503."""
    logger.error("Data access failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.api.main:app", host=get_api_host(), port=get_api_port())
