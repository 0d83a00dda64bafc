"""Tests for settings and engine construction."""
import pytest
from pydantic import ValidationError

from warehouse_api.config import Settings
from warehouse_api.database import create_db_engine


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    for name in ("API_KEY", "PORT", "SHUTDOWN_GRACE_PERIOD"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None, DATABASE_URL="sqlite:///:memory:")

    assert settings.API_KEY == ""
    assert settings.PORT == 3000
    assert settings.SHUTDOWN_GRACE_PERIOD == 5


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/warehouse")
    monkeypatch.setenv("API_KEY", "s3cret")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "postgresql://u:p@db:5432/warehouse"
    assert settings.API_KEY == "s3cret"
    assert settings.PORT == 8080


def test_postgres_engine_gets_pool_and_statement_timeout(monkeypatch):
    captured = {}

    def fake_create_engine(url, **kwargs):
        captured["url"] = url
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr("warehouse_api.database.create_engine", fake_create_engine)
    settings = Settings(
        _env_file=None,
        DATABASE_URL="postgresql://u:p@localhost:5432/warehouse",
        DB_POOL_SIZE=3,
        DB_STATEMENT_TIMEOUT_MS=1500,
    )

    assert create_db_engine(settings) == "engine"
    assert captured["pool_size"] == 3
    assert captured["max_overflow"] == 20
    assert captured["pool_pre_ping"] is True
    assert captured["connect_args"] == {"options": "-c statement_timeout=1500"}


def test_sqlite_engine_skips_pool_sizing(monkeypatch):
    captured = {}

    def fake_create_engine(url, **kwargs):
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr("warehouse_api.database.create_engine", fake_create_engine)

    create_db_engine(Settings(_env_file=None, DATABASE_URL="sqlite:///:memory:"))

    assert "pool_size" not in captured
    assert captured["connect_args"] == {"check_same_thread": False}
