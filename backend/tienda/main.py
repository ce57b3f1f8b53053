"""Tienda API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TiendaError → plain JSON string responses
    - Startup aborts when DATABASE_URL is unset or the database is unreachable
    - The pool is disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tienda.api.error_handlers import register_error_handlers
from tienda.api.routes import clientes, health, productos
from tienda.config import get_settings
from tienda.core.errors import DatabaseUnavailableError
from tienda.infrastructure.database import init_db
from tienda.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if not await manager.health_check():
        await manager.close()
        raise DatabaseUnavailableError()
    logger.info("Tienda API started")
    yield
    logger.info("Tienda API shutting down")
    await manager.close()


app = FastAPI(title="Tienda API", version="0.1.0", lifespan=lifespan)

app.include_router(health.router)
app.include_router(productos.router)
app.include_router(clientes.router)

register_error_handlers(app)
