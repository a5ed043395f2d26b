"""Error Hierarchy — typed, categorized exceptions for all Course Catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - RequestRejectedError subclasses (4xx) are rendered by a dedicated handler
    - Anything else that escapes a route becomes the uniform 500 envelope
    - No stack traces or internal state in user-facing bodies

Design Decisions:
    - PersistenceError is NOT a RequestRejectedError: it must reach the
      error-isolation middleware and surface as "Internal" (ADR: uniform 500)
    - to_response() yields the per-kind envelope: {message} or {errors}
"""

from enum import Enum


INTERNAL_ERROR_MESSAGE = "Sorry, there was an error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class CourseCatalogError(Exception):
    """Base exception for all Course Catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestRejectedError(CourseCatalogError):
    """Deliberate rejection of a request; short-circuits the pipeline."""


class UnauthenticatedError(RequestRejectedError):
    """No credentials, or credentials that cannot be decoded."""
    def __init__(self):
        super().__init__(
            "Unauthorized: No credentials provided in the Authorization header.",
            "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class ForbiddenError(RequestRejectedError):
    """Credentials present but they do not identify a user."""
    def __init__(self, reason: str):
        super().__init__(
            f"Forbidden: {reason}",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, 403,
        )
        self.reason = reason


class ValidationFailedError(RequestRejectedError):
    """One or more field rules failed; carries the ordered violation list."""
    def __init__(self, violations: list[str]):
        super().__init__(
            f"{len(violations)} validation error(s)",
            "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.violations = list(violations)

    def to_response(self) -> dict:
        return {"errors": self.violations}


class ResourceNotFoundError(RequestRejectedError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"There is no {resource_type.lower()} with id '{resource_id}'.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(CourseCatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


def internal_error_response(exc: BaseException) -> dict:
    """Uniform body for failures nobody converted into a client response."""
    return {
        "message": INTERNAL_ERROR_MESSAGE,
        "name": type(exc).__name__,
        "description": str(exc),
    }
