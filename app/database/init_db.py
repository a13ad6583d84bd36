"""
Database initialization and schema creation.

This module creates the catalog schema and can verify that it is present.
"""

import logging

from sqlalchemy import inspect

from app.database.connection import DatabaseManager, DEFAULT_DB_PATH, get_db_manager

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'genres', 'movies'}


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)

    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        logger.info("Creating database tables...")
        db_manager.create_tables()

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that the genres and movies tables exist.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", sorted(missing_tables))
        return False

    logger.info("All tables exist: %s", sorted(existing_tables))
    return True
