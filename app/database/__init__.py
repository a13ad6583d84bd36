"""
Database module for the movie catalog.

This module provides database models, connection management, and CRUD operations
for the SQLite database using SQLAlchemy ORM.
"""

from app.database.models import Base, Genre, Movie
from app.database.connection import DatabaseManager, get_db_manager
from app.database.init_db import init_database, verify_schema
from app.database import crud

__all__ = [
    # Models
    'Base',
    'Genre',
    'Movie',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
