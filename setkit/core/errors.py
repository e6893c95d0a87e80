"""Error Hierarchy — typed exceptions for boundary violations of the set operations.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Normal outcomes never raise: empty take_random returns a default, pluck omits absent values
    - Only argument-shape violations detected before an operation runs are raised here
    - Exceptions from caller-supplied classifiers propagate unchanged (never wrapped)

Design Decisions:
    - Single hierarchy with SetKitError base: callers can catch one type
    - Leaf errors also subclass TypeError/ValueError so plain-Python handlers still match
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class SetKitError(Exception):
    """Base exception for all SetKit errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

class ImmutableSetError(SetKitError, TypeError):
    """Operation needs to remove elements but the receiver cannot be mutated."""
    def __init__(self, type_name: str, operation: str):
        super().__init__(
            f"{operation} requires a mutable set, got {type_name}",
            "IMMUTABLE_SET", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR,
            ErrorContext(operation=operation, debug_info={"type": type_name}),
        )
        self.type_name = type_name


class NotARecordError(SetKitError, TypeError):
    """Element of a record collection is not a string-keyed mapping."""
    def __init__(self, type_name: str, operation: str = "pluck"):
        super().__init__(
            f"{operation} requires mapping elements, got {type_name}",
            "NOT_A_RECORD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR,
            ErrorContext(operation=operation, debug_info={"type": type_name}),
        )
        self.type_name = type_name


class InvalidArgumentError(SetKitError, ValueError):
    """Arguments are individually valid but conflict with each other."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.INVALID_ARGUMENT,
            ErrorSeverity.ERROR, ErrorContext(operation=operation),
        )
