"""
Genre API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.dependencies import get_db
from app.api.models.genre import GenreCreate, GenreList, GenreResponse
from app.database import crud

router = APIRouter(prefix="/api/genres", tags=["genres"])


@router.get("", response_model=GenreList)
def list_genres(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    """List genres ordered by name."""
    genres = crud.get_genres(db, skip=skip, limit=limit)
    return GenreList(
        genres=[GenreResponse.model_validate(g) for g in genres],
        total=crud.get_genre_count(db),
    )


@router.get("/{genre_id}", response_model=GenreResponse)
def get_genre(genre_id: int, db: Session = Depends(get_db)):
    """Get genre details by ID."""
    genre = crud.get_genre(db, genre_id)
    if not genre:
        raise HTTPException(status_code=404, detail="Genre not found")
    return GenreResponse.model_validate(genre)


@router.post("", response_model=GenreResponse)
def create_genre(genre_in: GenreCreate, db: Session = Depends(get_db)):
    """Create a new genre."""
    try:
        genre = crud.create_genre(db, name=genre_in.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GenreResponse.model_validate(genre)


@router.put("/{genre_id}", response_model=GenreResponse)
def update_genre(genre_id: int, genre_in: GenreCreate, db: Session = Depends(get_db)):
    """Rename a genre."""
    try:
        genre = crud.update_genre(db, genre_id, name=genre_in.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not genre:
        raise HTTPException(status_code=404, detail="Genre not found")
    return GenreResponse.model_validate(genre)


@router.delete("/{genre_id}")
def delete_genre(genre_id: int, db: Session = Depends(get_db)):
    """Delete a genre and every movie in it."""
    if not crud.delete_genre(db, genre_id):
        raise HTTPException(status_code=404, detail="Genre not found")
    return {"status": "ok", "genre_id": genre_id}
