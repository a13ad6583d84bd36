"""
Database connection management using SQLAlchemy.

This module creates the SQLite engine for the movie catalog, hands out
sessions, and owns the process-wide DatabaseManager used by the API.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.database.models import Base

logger = logging.getLogger(__name__)

# Default database path
DEFAULT_DB_PATH = "data/movies.db"

# Sentinel path for a private in-memory database
MEMORY_DB_PATH = ":memory:"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL.

    Args:
        db_path: Path to SQLite database file, or ``:memory:``

    Returns:
        SQLAlchemy database URL
    """
    if db_path == MEMORY_DB_PATH:
        return "sqlite://"

    # Ensure directory exists
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    return f"sqlite:///{os.path.abspath(db_path)}"


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable foreign key constraints for SQLite.

    Without this, deleting a genre would leave its movies pointing at a
    missing row.
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, and schema creation.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Initialize database manager.

        Args:
            db_path: Path to SQLite database file, or ``:memory:``
            echo: If True, log all SQL statements
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)

        # A single shared connection keeps in-memory databases alive and lets
        # request sessions hop between the event loop and the thread pool.
        self.engine = create_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
        logger.debug("DatabaseManager bound to %s", self.database_url)

    def create_tables(self):
        """Create the genres and movies tables if they don't exist."""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all catalog tables.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """Drop and recreate all tables."""
        logger.warning("Resetting catalog database at %s", self.database_url)
        self.drop_tables()
        self.create_tables()

    def get_session(self) -> Session:
        """
        Get a new database session.

        The caller is responsible for closing it; prefer ``session_scope``.
        """
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Commits on success, rolls back on failure, always closes.

        Usage:
            with db_manager.session_scope() as session:
                session.add(genre)
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_db_manager(db_path: str = DEFAULT_DB_PATH, echo: bool = False) -> DatabaseManager:
    """
    Get or create the global database manager instance.

    The first call decides the database path; later calls return the same
    manager regardless of their arguments.
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(db_path=db_path, echo=echo)
    return _db_manager
