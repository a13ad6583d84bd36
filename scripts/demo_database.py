#!/usr/bin/env python
"""
Catalog demonstration script - runs sample listing queries.

This script demonstrates:
- Catalog size
- Listing with a title search
- Listing with a genre filter
- The genre drop-down staying the same under any filter

Usage:
    python scripts/init_database.py --reset --seed 1
    python scripts/demo_database.py
"""

import sys
import asyncio
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.config import get_database_path
from app.core.catalog import CatalogQueryService, DatabaseMovieSource, FilterCriteria
from app.database import crud, get_db_manager


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def print_movies(movies, limit=5):
    for movie in movies[:limit]:
        genre = movie.genre.name if movie.genre else "-"
        print(f"  [{movie.movie_id:>4}] {movie.title or '(untitled)':<40} {genre:<12} ${movie.price}")
    if len(movies) > limit:
        print(f"  ... {len(movies) - limit} more")


async def run_demo(service, session):
    print_section("1. Catalog Overview")
    print(f"  Genres: {crud.get_genre_count(session):,}")
    print(f"  Movies: {crud.get_movie_count(session):,}")

    everything = await service.list_movies()
    print(f"\nUnfiltered listing: {len(everything.movies)} movies, {len(everything.genres)} genres")
    print_movies(everything.movies)

    if not everything.movies:
        print("\nNo movies yet. Run scripts/init_database.py first.")
        return

    print_section("2. Title Search")
    first_title = next((m.title for m in everything.movies if m.title), "")
    term = first_title.split()[0] if first_title else "a"
    result = await service.list_movies(FilterCriteria(search=term))
    print(f"\nTitles containing {term!r}: {len(result.movies)}")
    print_movies(result.movies)

    print_section("3. Genre Filter")
    genre = everything.genres[0]
    result = await service.list_movies(FilterCriteria(genre_id=genre.genre_id))
    print(f"\nMovies in {genre.name!r}: {len(result.movies)}")
    print_movies(result.movies)
    print(f"\nGenres offered while filtered: {len(result.genres)} (unfiltered: {len(everything.genres)})")


def main():
    """Run catalog demonstration."""
    print("="*60)
    print("Movie Catalog - Database Demo")
    print("="*60)

    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        service = CatalogQueryService(DatabaseMovieSource(session))
        asyncio.run(run_demo(service, session))

    print("="*60)


if __name__ == "__main__":
    main()
