"""Error Hierarchy — typed, categorized exceptions for every Tienda failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() is the plain message string sent as the JSON body
    - Validation errors are 400-level; database errors carry the status of their cause

Design Decisions:
    - Single hierarchy with TiendaError base: one FastAPI handler renders all of them
    - RequestFailedError wraps the underlying cause so logs keep the real category
      while the response keeps the operation's collapsed status
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for log records."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None
    operation: str | None = None
    cause_code: str | None = None


class TiendaError(Exception):
    """Base exception for all Tienda errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> str:
        """Response body: a plain message, serialized as a JSON string."""
        return self.message

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "entity": self.context.entity,
            "entity_id": self.context.entity_id,
            "operation": self.context.operation,
        }


# ─── Validation Errors (400-level) ──────────────────────────────

class NoFieldsToUpdateError(TiendaError):
    """Partial update carried no present field."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No fields to update", "NO_FIELDS_TO_UPDATE",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )


class MissingFieldsError(TiendaError):
    """Insert attempted without every required column."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing required fields: {', '.join(missing)}",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.missing = missing


class ResourceNotFoundError(TiendaError):
    """No row matched the requested id."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TiendaError):
    """Database operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        category: ErrorCategory = ErrorCategory.DATABASE,
        http_status: int = 500,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", category,
            ErrorSeverity.CRITICAL, context, http_status,
        )
        self.operation = operation


class DatabaseUnavailableError(TiendaError):
    """Database unreachable at startup."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Database unreachable at startup", "DATABASE_UNAVAILABLE",
            ErrorCategory.UNAVAILABLE, ErrorSeverity.CRITICAL, context, 503,
        )


class RequestFailedError(TiendaError):
    """Per-request failure reported with the operation's message and status."""
    def __init__(
        self,
        message: str,
        http_status: int,
        cause: TiendaError,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.cause_code = cause.code
        super().__init__(
            message, "REQUEST_FAILED", cause.category,
            cause.severity, ctx, http_status,
        )
        self.cause = cause
