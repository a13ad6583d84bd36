"""
Shared utilities package.

This package contains the logging configuration shared by the API and the
command line scripts.
"""

from app.utils.logging_config import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
