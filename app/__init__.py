"""
Movie Catalog Application Package.

This package contains the catalog listing logic, database operations,
REST API, Streamlit front-end, and utilities.
"""

__version__ = "1.0.0"
