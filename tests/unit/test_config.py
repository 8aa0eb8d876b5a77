"""Tests pour Settings, le logging et la creation de l'engine."""

import sys
from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError
from sqlalchemy import inspect, text

from osservice.config import Settings
from osservice.infrastructure.persistence.database import create_db_engine, init_db
from osservice.logging_config import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("OSSERVICE_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///data/osservice.db"
        assert settings.order_number_start == 1000
        assert settings.is_sqlite

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("OSSERVICE_ORDER_NUMBER_START", "5000")
        monkeypatch.setenv("OSSERVICE_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.order_number_start == 5000
        assert settings.log_level == "DEBUG"

    def test_paths_expanded(self):
        settings = Settings(_env_file=None, uploads_dir="~/uploads")
        assert settings.uploads_dir == Path.home() / "uploads"

    def test_invalid_number_start(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, order_number_start=0)

    def test_not_sqlite(self):
        settings = Settings(_env_file=None, database_url="postgresql://u:p@localhost/os")
        assert not settings.is_sqlite


class TestDatabase:
    def test_file_database_creates_parent(self, tmp_path):
        db_path = tmp_path / "nested" / "os.db"

        engine = create_db_engine(f"sqlite:///{db_path}")
        init_db(engine)

        assert db_path.exists()
        tables = set(inspect(engine).get_table_names())
        assert {"customers", "service_orders", "service_order_attachments", "sequences"} <= tables
        engine.dispose()

    def test_foreign_keys_enabled(self, engine):
        with engine.connect() as connection:
            assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        logger.remove()
        logger.add(sys.stderr)

    def test_configure_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "osservice.log"

        configure_logging(log_level="INFO", log_file=log_file)
        logger.info("message de test")
        logger.complete()

        assert log_file.exists()
        assert "message de test" in log_file.read_text()

    def test_configure_logging_without_file(self):
        configure_logging(log_level="WARNING", log_file=None, json_console=True)
