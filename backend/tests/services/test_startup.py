"""Startup — an unreachable database aborts the lifespan."""

import logging

import pytest

import tienda.infrastructure.database as db_module
from tienda.config import get_settings
from tienda.core.errors import DatabaseUnavailableError
from tienda.main import app, lifespan


@pytest.fixture
def unreachable_database(monkeypatch):
    monkeypatch.setenv(
        "DATABASE_URL", "sqlite+aiosqlite:////nonexistent_dir/tienda.db",
    )
    get_settings.cache_clear()
    original_manager = db_module.db_manager
    yield
    get_settings.cache_clear()
    db_module.db_manager = original_manager
    for handler in list(logging.root.handlers):
        if getattr(handler, "_tienda", False):
            logging.root.removeHandler(handler)


async def test_unreachable_database_aborts_startup(unreachable_database):
    with pytest.raises(DatabaseUnavailableError):
        async with lifespan(app):
            pass


async def test_failed_startup_never_yields(unreachable_database):
    started = False
    with pytest.raises(DatabaseUnavailableError):
        async with lifespan(app):
            started = True
    assert started is False
