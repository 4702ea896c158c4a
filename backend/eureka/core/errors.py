"""Error Hierarchy — every failure the Q&A engine can report to a client.

Invariants:
    - Each error class fixes its code, category, severity and HTTP status as
      class attributes; instances only carry a message and an ErrorContext
    - Validation, auth and existence errors are raised before the first write
    - to_response() never includes ErrorContext.debug_info

Design Decisions:
    - Class-level metadata over constructor arguments: a subclass is one
      declaration, and the global handler reads the same four attributes from all
    - ErrorContext is a dataclass so handlers can enrich it (field, resource)
      without knowing the concrete error type
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Coarse grouping a client can switch on without parsing codes."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where the failure happened: who, on what, which input field."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    resource_type: str | None = None
    resource_id: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class EurekaError(Exception):
    """Root of the hierarchy; the FastAPI handler catches this type."""

    code: str = "INTERNAL_ERROR"
    category: ErrorCategory = ErrorCategory.INTERNAL
    severity: ErrorSeverity = ErrorSeverity.ERROR
    http_status: int = 500

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """REST envelope: {"error": {code, message, category, severity, timestamp, context}}."""
        ctx = self.context
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": ctx.timestamp.isoformat(),
                "context": {
                    "resource_type": ctx.resource_type,
                    "resource_id": ctx.resource_id,
                    "field": ctx.field,
                },
            }
        }


# ─── Client errors (4xx) ─────────────────────────────────────────

class BadRequestError(EurekaError):
    """Input is missing, blank or not one of the allowed values."""
    code = "BAD_REQUEST"
    category = ErrorCategory.VALIDATION
    severity = ErrorSeverity.WARNING
    http_status = 400

    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(message, context)
        self.context.field = field
        self.field = field


class UnauthorizedError(EurekaError):
    code = "UNAUTHORIZED"
    category = ErrorCategory.AUTHENTICATION
    severity = ErrorSeverity.WARNING
    http_status = 401

    def __init__(
        self, message: str = "Authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(message, context)


class ForbiddenError(EurekaError):
    """Caller is known but does not own the resource."""
    code = "FORBIDDEN"
    category = ErrorCategory.AUTHORIZATION
    severity = ErrorSeverity.WARNING
    http_status = 403


class ResourceNotFoundError(EurekaError):
    code = "RESOURCE_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(
        self, resource_type: str, resource_id: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(f"{resource_type} '{resource_id}' not found", context)
        self.context.resource_type = resource_type
        self.context.resource_id = resource_id
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(EurekaError):
    """Username or email already registered."""
    code = "CONFLICT"
    category = ErrorCategory.CONFLICT
    severity = ErrorSeverity.WARNING
    http_status = 409


# ─── Server errors (5xx) ─────────────────────────────────────────

class DatabaseError(EurekaError):
    code = "DATABASE_ERROR"
    category = ErrorCategory.DATABASE
    severity = ErrorSeverity.CRITICAL
    http_status = 500

    def __init__(
        self, message: str, operation: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(f"Database {operation} failed: {message}", context)
        self.operation = operation
