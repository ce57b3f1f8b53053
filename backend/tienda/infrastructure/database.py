"""Database Session Manager — bounded async connection pool with rollback and error mapping.

Invariants:
    - One pooled session per repository call; released on every exit path
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy and socket-level exceptions mapped to DatabaseError (core/errors.py)
    - Only lost connections and socket errors are 503; other operational errors are 500
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from tienda.core.errors import DatabaseError, ErrorCategory

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 0,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError(
                "Integrity constraint violated", "commit",
                ErrorCategory.CONFLICT, 409,
            )
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            if e.connection_invalidated:
                raise DatabaseError(
                    "Connection lost", "execute",
                    ErrorCategory.UNAVAILABLE, 503,
                )
            raise DatabaseError("Operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        except OSError as e:
            logger.error(f"DB connection error: {e}")
            raise DatabaseError(
                "Connection failed", "connect", ErrorCategory.UNAVAILABLE, 503,
            )
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (startup and readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except DatabaseError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Dispose the engine and every pooled connection."""
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """FastAPI dependency for the pooled session manager."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager
