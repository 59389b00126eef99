"""Error Hierarchy — typed, categorized exceptions for every account-service failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it maps to
    - to_response() produces the public envelope {"error": message} — nothing else leaks
    - StoreError never exposes driver/SQL detail in its message

Design Decisions:
    - Single hierarchy with AccountServiceError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - code/category/severity kept for logs only — the public contract is the HTTP status
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging. Never serialized to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class AccountServiceError(Exception):
    """Base exception for all account-service errors."""

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
        """Convert to the public error envelope."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the logger (see infrastructure/observability.py)."""
        return {
            "error_code": self.code,
            "user_id": self.context.user_id,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InputValidationError(AccountServiceError):
    """Malformed or missing request field."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class AuthenticationError(AccountServiceError):
    """Credential mismatch. Same message whether the user exists or not."""
    def __init__(self, message: str = "Invalid email or password", context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ResourceNotFoundError(AccountServiceError):
    """Requested user (or route) does not exist."""
    def __init__(self, message: str = "User not found", context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class ConflictError(AccountServiceError):
    """Email or mobile number already belongs to another user."""
    def __init__(
        self,
        message: str = "User with this email or mobile number already exists",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNIQUENESS_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(AccountServiceError):
    """Persistence layer failed. Detail is logged, never returned."""
    def __init__(
        self,
        operation: str,
        message: str = "Internal server error",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation

    def log_extra(self) -> dict:
        return {**super().log_extra(), "operation": self.operation}
