"""Error Hierarchy: typed, categorized exceptions for every clinic API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; persistence errors (500-level) are critical
    - to_response() produces the REST envelope {"message", "code"}
    - No internal details (SQL, driver messages) in user-facing messages

Design Decisions:
    - Single hierarchy with ClinicError base: one FastAPI handler catches all of them
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context carried alongside an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: str | None = None


class ClinicError(Exception):
    """Base exception for all clinic API errors."""

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
        """Convert to the REST error envelope."""
        return {"message": self.message, "code": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidRequestError(ClinicError):
    """Request is well-formed JSON but semantically unusable."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class AuthenticationError(ClinicError):
    """Credentials or access token rejected."""
    def __init__(
        self, message: str = "Invalid credentials", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(ClinicError):
    """Authenticated principal lacks the capability for this action."""
    def __init__(self, capability: str, context: ErrorContext | None = None):
        super().__init__(
            "You do not have permission to perform this action",
            "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.capability = capability


class ResourceNotFoundError(ClinicError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = resource_type
        ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


# ─── Persistence Errors (500-level) ─────────────────────────────

class PersistenceError(ClinicError):
    """Database operation failed."""
    def __init__(
        self,
        operation: str,
        message: str = "Database operation failed",
        code: str = "DATABASE_ERROR",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class ConstraintError(PersistenceError):
    """Uniqueness or foreign-key constraint violated."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            operation, "Database operation failed",
            "CONSTRAINT_VIOLATION", context,
        )
