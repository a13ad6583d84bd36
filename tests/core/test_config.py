"""
Tests for environment configuration and logging setup.
"""

import logging

import pytest

from app.api import config
from app.utils.logging_config import configure_api_logging, get_logger, setup_logging


class TestConfig:
    """Tests for environment-driven settings."""

    def test_catalog_source_default(self, monkeypatch):
        """CATALOG_SOURCE defaults to the database."""
        monkeypatch.delenv("CATALOG_SOURCE", raising=False)
        assert config.get_catalog_source() == "database"

    def test_catalog_source_fake(self, monkeypatch):
        """CATALOG_SOURCE is trimmed and lowercased."""
        monkeypatch.setenv("CATALOG_SOURCE", " Fake ")
        assert config.get_catalog_source() == "fake"

    def test_catalog_source_invalid(self, monkeypatch):
        """Unknown CATALOG_SOURCE values raise ValueError."""
        monkeypatch.setenv("CATALOG_SOURCE", "mongo")
        with pytest.raises(ValueError):
            config.get_catalog_source()

    def test_database_path_from_url(self, monkeypatch):
        """DATABASE_URL is turned into a file path."""
        monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp/catalog.db")
        assert config.get_database_path() == "tmp/catalog.db"

    def test_database_path_default(self, monkeypatch):
        """Without DATABASE_URL the path ends in movies.db."""
        monkeypatch.delenv("DATABASE_URL", raising=False)
        assert config.get_database_path().endswith("movies.db")

    def test_fake_movie_count(self, monkeypatch):
        """FAKE_MOVIE_COUNT sets the generated catalog size."""
        monkeypatch.setenv("FAKE_MOVIE_COUNT", "7")
        assert config.get_fake_movie_count() == 7


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_writes_file(self, tmp_path):
        """setup_logging writes records to the log file."""
        setup_logging(log_file="test.log", level="DEBUG", log_dir=str(tmp_path))
        try:
            get_logger("tests.logging").debug("hello catalog")
            for handler in logging.getLogger().handlers:
                handler.flush()

            assert "hello catalog" in (tmp_path / "test.log").read_text()
        finally:
            for handler in logging.getLogger().handlers:
                handler.close()
            logging.getLogger().handlers.clear()

    def test_get_logger_level_override(self):
        """get_logger applies a level override."""
        logger = get_logger("tests.level", level="warning")
        assert logger.level == logging.WARNING

    def test_configure_api_logging(self, tmp_path, monkeypatch):
        """configure_api_logging writes api.log at the LOG_LEVEL level."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LOG_LEVEL", "warning")
        configure_api_logging(level=config.get_log_level())
        try:
            assert logging.getLogger().level == logging.WARNING
            get_logger("tests.api").warning("catalog api warning")
            get_logger("tests.api").info("catalog api info")
            for handler in logging.getLogger().handlers:
                handler.flush()

            text = (tmp_path / "logs" / "api.log").read_text()
            assert "catalog api warning" in text
            assert "catalog api info" not in text
        finally:
            for handler in logging.getLogger().handlers:
                handler.close()
            logging.getLogger().handlers.clear()

    def test_configure_api_logging_debug(self, tmp_path, monkeypatch):
        """debug=True overrides the configured level."""
        monkeypatch.chdir(tmp_path)
        configure_api_logging(debug=True, level="ERROR")
        try:
            assert logging.getLogger().level == logging.DEBUG
        finally:
            for handler in logging.getLogger().handlers:
                handler.close()
            logging.getLogger().handlers.clear()
