"""Error Hierarchy: typed, categorized exceptions for inventory failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces the flat envelope {"error": "<message>"}
    - DatabaseError carries the driver message verbatim (not sanitized for end users)

Design Decisions:
    - Single hierarchy with InventoryError base: one FastAPI handler translates all of it
    - Not-found is a 404 with a fixed per-entity message ("User not found")
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


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: str | None = None


class InventoryError(Exception):
    """Base exception for all inventory errors."""

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
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(InventoryError):
    """Request body failed schema validation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(InventoryError):
    """Identifier-keyed lookup matched zero rows."""
    def __init__(
        self, entity: str, entity_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = entity
        ctx.entity_id = entity_id
        super().__init__(
            f"{entity} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.entity = entity
        self.entity_id = entity_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(InventoryError):
    """Database operation failed (connectivity, constraint, query)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
