"""Error Hierarchy — typed, categorized exceptions for all Todo API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) answer {"message": ...}
    - Infrastructure errors (500-level) answer {"error": "Internal Server Error"}
    - No driver details leaked in user-facing bodies

Design Decisions:
    - Single hierarchy with TodoApiError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass
from enum import Enum

INTERNAL_SERVER_ERROR = "Internal Server Error"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    todo_id: str | None = None
    operation: str | None = None


class TodoApiError(Exception):
    """Base exception for all Todo API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.CRITICAL,
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
        """Convert to the REST error body."""
        return {"message": self.message}

    def log_extra(self) -> dict:
        """Fields attached to the log record for this error."""
        return {
            "error_code": self.code,
            "todo_id": self.context.todo_id,
            "operation": self.context.operation,
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidTodoIdError(TodoApiError):
    """Identifier does not have the store's identifier shape."""
    def __init__(self, todo_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.todo_id = todo_id
        super().__init__(
            "Invalid todo ID", "INVALID_TODO_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class TodoNotFoundError(TodoApiError):
    """Well-formed identifier with no matching record."""
    def __init__(self, todo_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.todo_id = todo_id
        super().__init__(
            "Todo not found", "TODO_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TodoApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": INTERNAL_SERVER_ERROR}
