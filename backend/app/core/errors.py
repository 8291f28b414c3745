"""Error Hierarchy — typed, categorized exceptions for every store-admin failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are detected explicitly; anything else is flattened
      to INTERNAL_ERROR by the catch-all handler
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StoreAdminError base: FastAPI global handler catches all
    - 405 for ownership mismatch and 403 for missing identity: status codes the
      dashboard client already keys its toasts on
    - ReferentialIntegrityError keeps the generic 500 status but its own code, so the
      client can show "remove dependent records first"
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
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    REFERENTIAL_INTEGRITY = "referential_integrity"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    store_id: str | None = None
    entity: str | None = None
    entity_id: str | None = None
    debug_info: dict[str, Any] | None = None


class StoreAdminError(Exception):
    """Base exception for all store-admin errors."""

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
                    "store_id": self.context.store_id,
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldError(StoreAdminError):
    """A required path or body field is empty."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        label = field[:1].upper() + field[1:]
        super().__init__(
            f"{label} is required",
            "MISSING_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class UnauthenticatedError(StoreAdminError):
    """No caller identity on a request that needs one."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthenticated",
            "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 403,
        )


class UnauthorizedError(StoreAdminError):
    """Caller does not own the store named in the path."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 405,
        )


class ResourceNotFoundError(StoreAdminError):
    """Requested resource does not exist (in the requested store)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or resource_type
        ctx.entity_id = ctx.entity_id or resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Persistence / External Errors ──────────────────────────────

class ReferentialIntegrityError(StoreAdminError):
    """Delete blocked because dependent rows still reference the target."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or resource_type
        ctx.entity_id = ctx.entity_id or resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' is still referenced by other records",
            "REFERENTIAL_INTEGRITY", ErrorCategory.REFERENTIAL_INTEGRITY,
            ErrorSeverity.ERROR, ctx, 500,
        )


class DatabaseError(StoreAdminError):
    """Database operation failed.

    Answers like any unexpected failure (500 INTERNAL_ERROR, fixed message);
    the cause stays in debug_info for the log.
    """
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"operation": operation, "cause": message}
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.cause = message


class MediaHostError(StoreAdminError):
    """Media host rejected or failed an asset deletion."""
    def __init__(
        self, message: str, asset_ids: list[str], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.debug_info = {"asset_ids": asset_ids}
        super().__init__(
            f"Media host error: {message}",
            "MEDIA_HOST_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, 502,
        )
        self.asset_ids = asset_ids
