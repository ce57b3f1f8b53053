"""Error Handlers — global exception handlers for the Tienda API.

Invariants:
    - TiendaError → its http_status with the plain message as JSON string
    - RequestValidationError → 400 "Invalid request body"; field details only in the log
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TiendaError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from tienda.core.errors import TiendaError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tienda_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_tienda_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TiendaError)
    async def tienda_error_handler(request: Request, exc: TiendaError):
        """Handle all Tienda domain/infrastructure errors."""
        cause = getattr(exc, "cause", None)
        detail = f"{exc.message} ({cause.message})" if cause else exc.message
        logger.error(
            f"TiendaError: {detail}",
            extra={
                **exc.log_extra(),
                "cause_code": exc.context.cause_code,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed JSON, missing fields, or a non-integer id."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content="Invalid request body",
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content="Internal server error",
        )

