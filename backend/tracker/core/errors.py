"""Error Hierarchy — typed failures the Tracker API can report.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
      and the HTTP status it maps to
    - to_response() produces the REST error envelope {"error": {...}}
    - NotFound and ReferenceNotFound both map to 404; code and context.field
      tell them apart (a missing path entity has no field)

Design Decisions:
    - Single hierarchy under TrackerError: one FastAPI handler renders them all
    - ErrorContext names the entity involved so the same object feeds both the
      response body and the structured log line
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    REFERENCE_NOT_FOUND = "reference_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which entity (and which reference field, if any) the error is about."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_type: str | None = None
    entity_key: str | None = None
    field: str | None = None

    def as_dict(self) -> dict:
        return {
            "entity_type": self.entity_type,
            "entity_key": self.entity_key,
            "field": self.field,
        }


class TrackerError(Exception):
    """Base exception for all Tracker errors."""

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

    def to_response(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": self.context.as_dict(),
            }
        }

    def log_extra(self) -> dict:
        """Fields for logger `extra=`; None values are dropped by the formatter."""
        return {"error_code": self.code, **self.context.as_dict()}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(TrackerError):
    """The entity named by the request path does not exist."""
    def __init__(
        self, entity_type: str, entity_key: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_type = entity_type
        ctx.entity_key = entity_key
        super().__init__(
            f"{entity_type} '{entity_key}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.entity_type = entity_type
        self.entity_key = entity_key


class ReferenceNotFoundError(TrackerError):
    """A reference field in the candidate document names a missing entity."""
    def __init__(
        self,
        field_name: str,
        target_type: str,
        key: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_type = target_type
        ctx.entity_key = key
        ctx.field = field_name
        super().__init__(
            f"Referenced {target_type} '{key}' in field '{field_name}' not found",
            "REFERENCE_NOT_FOUND", ErrorCategory.REFERENCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.field = field_name
        self.target_type = target_type
        self.key = key


class DuplicateKeyError(TrackerError):
    """A unique attribute is already taken by another entity."""
    def __init__(
        self,
        entity_type: str,
        field_name: str,
        value: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_type = entity_type
        ctx.field = field_name
        super().__init__(
            f"{entity_type} with {field_name} '{value}' already exists",
            "DUPLICATE_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.field = field_name
        self.value = value


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
