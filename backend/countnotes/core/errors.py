"""Error Hierarchy — typed, categorized failures for all CountNotes failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and not-found failures are 400-level; storage failures are 500-level
    - Failures travel inside Err results; they are raised only by the codec,
      the backend adapters, and unwrap() at the HTTP boundary
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy rooted at CountNotesError: the FastAPI handler and
      the Result type share one error shape
    - ErrorContext as dataclass: storage key, note id and operation ride along
      for logging without coupling to the logging setup
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Failure kinds carried by Err results."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    DECODE = "decode"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    storage_key: str | None = None
    note_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class CountNotesError(Exception):
    """Base exception for all CountNotes failures."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "storage_key": self.context.storage_key,
                    "note_id": self.context.note_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Failures (400-level) ────────────────────────────────

class ValidationFailure(CountNotesError):
    """Input violates an invariant (empty or over-length note content)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class NotFoundFailure(CountNotesError):
    """Referenced entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Storage Failures (500-level) ───────────────────────────────

class StorageFailure(CountNotesError):
    """Backend read/write raised, timed out, or returned undecodable data."""
    def __init__(
        self,
        message: str,
        operation: str,
        timed_out: bool = False,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
        self.timed_out = timed_out


class DecodeError(CountNotesError):
    """Stored structure is missing fields or has the wrong types."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "DECODE_ERROR", ErrorCategory.DECODE,
            ErrorSeverity.ERROR, None, 500,
        )
        self.field = field


class DatabaseError(CountNotesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class UnexpectedFailure(CountNotesError):
    """Invariant the caller cannot recover from (e.g. id generator exhausted)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UNEXPECTED_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
