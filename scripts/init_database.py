#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

This script:
1. Creates the database schema (genres and movies tables)
2. Seeds generated demo genres and movies
3. Verifies the schema and prints a summary

Usage:
    # Fresh database with 100 demo movies
    python scripts/init_database.py --reset

    # Reproducible demo data
    python scripts/init_database.py --reset --count 250 --seed 42

    # Schema only, no demo data
    python scripts/init_database.py --no-seed-data
"""

import sys
import argparse
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.config import get_database_path
from app.core.catalog import generate_catalog
from app.database import crud, init_database, verify_schema
from app.utils.logging_config import configure_seed_logging

logger = logging.getLogger("scripts.init_database")


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def seed_catalog(db_manager, count, seed=None):
    """
    Insert generated genres and movies.

    Genres that already exist by name are reused, so seeding an existing
    database adds movies without duplicating genres.

    Args:
        db_manager: DatabaseManager instance
        count: Number of movies to generate
        seed: Optional Faker seed

    Returns:
        Tuple of (genres inserted, movies inserted)
    """
    print_section("Seeding Catalog")

    genres, movies = generate_catalog(count=count, seed=seed, assign_ids=False)
    new_genres = 0
    with db_manager.session_scope() as session:
        for genre in genres:
            existing = crud.get_genre_by_name(session, genre.name)
            if existing is None:
                session.add(genre)
                new_genres += 1
                continue
            logger.debug("Reusing genre %r (id=%d)", existing.name, existing.genre_id)
            for movie in list(genre.movies):
                movie.genre = existing
        session.add_all(movies)

    logger.info("Inserted %d genres and %d movies", new_genres, len(movies))
    return new_genres, len(movies)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create and seed the movie catalog database")
    parser.add_argument('--db-path', default=get_database_path(),
                        help='SQLite database file (default: DATABASE_URL or data/movies.db)')
    parser.add_argument('--reset', action='store_true',
                        help='Drop existing tables before creating them')
    parser.add_argument('--count', type=int, default=100,
                        help='Number of demo movies to generate (default: 100)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for reproducible demo data')
    parser.add_argument('--no-seed-data', action='store_true',
                        help='Create the schema without demo data')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_seed_logging(debug=args.debug)

    print_section("Movie Catalog Database Setup")
    db_manager = init_database(db_path=args.db_path, reset=args.reset)

    if not verify_schema(db_manager):
        print("\n[ERROR] Database schema verification failed")
        return 1

    if not args.no_seed_data:
        with db_manager.session_scope() as session:
            existing = crud.get_movie_count(session)
        if existing and not args.reset:
            logger.warning("Database already holds %d movies; adding more", existing)
        seed_catalog(db_manager, count=args.count, seed=args.seed)

    print_section("Summary")
    with db_manager.session_scope() as session:
        print(f"  Genres: {crud.get_genre_count(session):,}")
        print(f"  Movies: {crud.get_movie_count(session):,}")
    print(f"  Database: {db_manager.database_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
