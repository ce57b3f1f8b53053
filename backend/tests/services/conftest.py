"""Service test fixtures — async in-memory DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db_manager dependency overridden with a manager bound to the test engine
    - drop_tables simulates a database failure for every statement

Design Decisions:
    - SQLite in-memory: fast, no external dependency; RETURNING needs SQLite >= 3.35
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from tienda.db.base import Base
from tienda.infrastructure.database import DatabaseSessionManager, get_db_manager
from tienda.models import Cliente, Producto
from tienda.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    """Session manager bound to the test engine (bypasses pool sizing args)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with the session manager overridden."""
    app.dependency_overrides[get_db_manager] = lambda: test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def drop_tables(test_engine):
    """Remove both tables so every statement fails at the database."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def seed_producto(test_db):
    producto = Producto(
        nombre="Teclado", categoria="Periféricos", precio=45.5, cantidad=10,
    )
    test_db.add(producto)
    await test_db.commit()
    await test_db.refresh(producto)
    return producto


@pytest.fixture
async def seed_cliente(test_db):
    cliente = Cliente(
        nombre="Ana Pérez", telefono="+56 9 1234 5678", presupuesto=100.0,
    )
    test_db.add(cliente)
    await test_db.commit()
    await test_db.refresh(cliente)
    return cliente
