"""Settings — required DATABASE_URL, driver rewrite, defaults."""

import pytest
from pydantic import ValidationError

from tienda.config import Settings


def test_missing_database_url_is_fatal(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_plain_postgres_url_gets_asyncpg_driver(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/tienda")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://u:p@localhost:5432/tienda"


def test_other_urls_are_left_alone(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///x.db")
    assert Settings(_env_file=None).database_url == "sqlite+aiosqlite:///x.db"


def test_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///x.db")
    settings = Settings(_env_file=None)
    assert settings.database_pool_size == 5
    assert settings.database_max_overflow == 0
    assert (settings.host, settings.port) == ("127.0.0.1", 8080)
    assert settings.classified_errors is False


def test_env_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///x.db")
    monkeypatch.setenv("classified_errors", "true")
    assert Settings(_env_file=None).classified_errors is True
