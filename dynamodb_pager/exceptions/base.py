from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Closed set of error classes the retry layer can reason about."""

    CAPACITY_EXHAUSTED = "capacity_exhausted"
    THROTTLED = "throttled"
    VALIDATION = "validation"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVICE_UNAVAILABLE = "service_unavailable"
    NETWORK = "network"
    UNKNOWN = "unknown"


class DynamoDBPagerError(Exception):
    """Base exception for all dynamodb_pager errors.

    Attributes:
        message: Human-readable error message
        original_error: The original exception that caused this error (if any)
        context: Additional context information about the error
        kind: Classification used by the retry layer
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information about the error
            error_code: Structured error code reported by the store, if any
        """
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        self.error_code = error_code
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        error_str = self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            error_str += f" (Context: {context_str})"
        return error_str

    def __repr__(self) -> str:
        """Return detailed string representation of the error."""
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"original_error={self.original_error!r}, context={self.context!r})"
        )
