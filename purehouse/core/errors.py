"""Error Hierarchy — typed, categorized exceptions for all Purehouse failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - "Input was invalid" (400) and "resource does not exist" (404) are distinct
      classes with distinct codes; callers must be able to tell them apart
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PurehouseError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    post_id: str | None = None
    field_name: str | None = None


class PurehouseError(Exception):
    """Base exception for all Purehouse errors."""

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
                    "post_id": self.context.post_id,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class PostValidationError(PurehouseError):
    """Post payload violates a field rule (presence, length)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class InvalidIdentifierError(PurehouseError):
    """External identifier string is not a well-formed post id."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{raw_id}' is not a valid post identifier",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw_id = raw_id


class ResourceNotFoundError(PurehouseError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.post_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PurehouseError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class NotificationDeliveryError(PurehouseError):
    """Worker sink unreachable or rejected the event.

    Never surfaces through the API: the dispatcher swallows it.
    """
    def __init__(self, message: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Notification delivery failed ({reason}): {message}",
            "NOTIFICATION_DELIVERY_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 503,
        )
        self.reason = reason
