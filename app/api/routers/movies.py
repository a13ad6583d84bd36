"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session

from app.api.dependencies import get_catalog_service, get_db
from app.api.models.genre import GenreResponse
from app.api.models.movie import CatalogResponse, MovieCreate, MovieResponse, MovieUpdate
from app.core.catalog import CatalogQueryService, FilterCriteria
from app.database import crud

router = APIRouter(prefix="/api/movies", tags=["movies"])

NULLABLE_FIELDS = ("title", "plot", "poster")


@router.get("", response_model=CatalogResponse)
async def list_movies(
    genre_id: int | None = Query(None, description="Only movies in this genre"),
    search: str | None = Query(None, description="Case-sensitive text contained in the title"),
    service: CatalogQueryService = Depends(get_catalog_service),
):
    """List catalog movies, optionally filtered by title text and genre."""
    result = await service.list_movies(FilterCriteria(genre_id=genre_id, search=search))
    return CatalogResponse(
        movies=[MovieResponse.model_validate(m) for m in result.movies],
        genres=[GenreResponse.model_validate(g) for g in result.genres],
        genre_id=genre_id,
        search=search,
        total=len(result.movies),
    )


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: int, db: Session = Depends(get_db)):
    """Get movie details by ID."""
    movie = crud.get_movie(db, movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieResponse.model_validate(movie)


@router.post("", response_model=MovieResponse)
def create_movie(movie_in: MovieCreate, db: Session = Depends(get_db)):
    """Add a movie to an existing genre."""
    if not crud.get_genre(db, movie_in.genre_id):
        raise HTTPException(status_code=404, detail="Genre not found")
    try:
        movie = crud.create_movie(db, **movie_in.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MovieResponse.model_validate(movie)


@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(movie_id: int, movie_in: MovieUpdate, db: Session = Depends(get_db)):
    """Update the fields present in the request body."""
    if not crud.get_movie(db, movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    # Optional columns may be cleared with an explicit null; required ones may not.
    changes = {
        k: v for k, v in movie_in.model_dump(exclude_unset=True).items()
        if v is not None or k in NULLABLE_FIELDS
    }
    if changes.get("genre_id") is not None and not crud.get_genre(db, changes["genre_id"]):
        raise HTTPException(status_code=404, detail="Genre not found")
    try:
        movie = crud.update_movie(db, movie_id, **changes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MovieResponse.model_validate(movie)


@router.delete("/{movie_id}")
def delete_movie(movie_id: int, db: Session = Depends(get_db)):
    """Delete a movie."""
    if not crud.delete_movie(db, movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    return {"status": "ok", "movie_id": movie_id}
