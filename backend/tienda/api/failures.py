"""Failure Mapping — turns a data-layer error into the operation's HTTP failure.

Invariants:
    - Collapsed mode (default): one status per operation, whatever the cause
    - Classified mode: the cause's own status (404 not found, 409 conflict,
      503 unavailable, 500 otherwise); the message stays the operation's
    - NoFieldsToUpdateError is never collapsed: it is always 400
    - Logged once, by the TiendaError handler, with the cause attached
"""

from tienda.core.errors import (
    ErrorContext, NoFieldsToUpdateError, RequestFailedError, TiendaError,
)


def collapse_failure(
    exc: TiendaError,
    message: str,
    fallback_status: int,
    classified: bool = False,
) -> TiendaError:
    """Build the error a route raises for a failed repository call."""
    if isinstance(exc, NoFieldsToUpdateError):
        return exc
    status_code = exc.http_status if classified else fallback_status
    return RequestFailedError(
        message, status_code, cause=exc,
        context=ErrorContext(
            entity=exc.context.entity,
            entity_id=exc.context.entity_id,
            operation=exc.context.operation,
        ),
    )
