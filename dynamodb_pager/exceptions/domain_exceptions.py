"""
Domain-Specific Exceptions for dynamodb_pager

This module consolidates the exceptions that extend DynamoDBPagerError.
Every exception carries an ErrorKind so the retry layer can classify it
without looking at message text.

Organized by category:
1. Malformed Input Errors
2. Retriable Capacity Errors
3. Terminal Remote Errors
4. Operation-Level Errors
"""

from typing import Any, Dict, Optional

from .base import DynamoDBPagerError, ErrorKind


# =============================================================================
# Malformed Input Errors
# =============================================================================

class ValidationError(DynamoDBPagerError):
    """Raised when caller input or a request is rejected as invalid.

    Used for:
    - Bad limits and other caller arguments
    - ValidationException reported by DynamoDB
    - Item collection size violations
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        errors: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
            error_code: DynamoDB error code when raised from a wire call
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context, error_code)


class MalformedKeyError(ValidationError):
    """Raised when a key expression is not of the form ``attribute:value``."""

    def __init__(self, expression: str, reason: str = "expected 'attribute:value'"):
        self.expression = expression
        super().__init__(
            f"Malformed key expression {expression!r}: {reason}",
            errors={'expression': expression},
        )


# =============================================================================
# Retriable Capacity Errors
# =============================================================================

class RetryableError(DynamoDBPagerError):
    """Raised when an operation fails for a temporary reason.

    Whether it is actually retried depends on the RetryPolicy's
    retriable_error_kinds.
    """

    kind = ErrorKind.THROTTLED

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            error_code: DynamoDB error code
        """
        super().__init__(message, original_error, error_code=error_code)


class CapacityExceededError(RetryableError):
    """Raised for ProvisionedThroughputExceededException."""

    kind = ErrorKind.CAPACITY_EXHAUSTED


class ThrottlingError(RetryableError):
    """Raised for request-rate throttling other than provisioned capacity.

    Used for:
    - RequestLimitExceeded
    - ThrottlingException
    """

    kind = ErrorKind.THROTTLED


# =============================================================================
# Terminal Remote Errors
# =============================================================================

class ConnectionError(DynamoDBPagerError):
    """Raised when DynamoDB cannot be reached or refuses the caller.

    Used for:
    - Network connectivity issues and invalid endpoints
    - Authentication/authorization failures
    - Unknown error codes
    """

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        kind: ErrorKind = ErrorKind.NETWORK,
        error_code: Optional[str] = None,
    ):
        """Initialize connection error.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information (e.g., endpoint, region)
            kind: NETWORK, ACCESS_DENIED or UNKNOWN
            error_code: DynamoDB error code, if the service answered
        """
        self.kind = kind
        super().__init__(message, original_error, context, error_code)


class NotFoundError(DynamoDBPagerError):
    """Raised when a table or index does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'table', 'index')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
            error_code: DynamoDB error code
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context, error_code)


class ConflictError(DynamoDBPagerError):
    """Raised when a conditional check or transaction conflicts."""

    kind = ErrorKind.CONFLICT

    def __init__(
        self,
        message: str,
        resource_id: Optional[str] = None,
        original_error: Optional[Exception] = None,
        error_code: Optional[str] = None,
    ):
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context, error_code)


class ServiceUnavailableError(DynamoDBPagerError):
    """Raised for InternalServerError and ServiceUnavailable responses."""

    kind = ErrorKind.SERVICE_UNAVAILABLE


# =============================================================================
# Operation-Level Errors
# =============================================================================

class OperationFailedError(DynamoDBPagerError):
    """Raised by the public operations when a wire call fails for good.

    The message is prefixed with the operation name (e.g. ``GetItems failed:``)
    and ``kind`` mirrors the classification of the underlying error.
    """

    def __init__(
        self,
        operation: str,
        original_error: Exception,
        message: Optional[str] = None,
        kind: Optional[ErrorKind] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize operation failure.

        Args:
            operation: Public operation name (GetItems, PutItem, ...)
            original_error: The store error that ended the operation
            message: Override for the default ``<operation> failed: <error>``
            kind: Classification, taken from original_error when omitted
            error_code: Store error code, taken from original_error when omitted
        """
        self.operation = operation
        self.kind = kind or getattr(original_error, 'kind', ErrorKind.UNKNOWN)
        super().__init__(
            message or f"{operation} failed: {original_error}",
            original_error,
            error_code=error_code or getattr(original_error, 'error_code', None),
        )


class RetryExhaustedError(OperationFailedError):
    """Raised when the backoff schedule gives up on a retriable error."""

    def __init__(
        self,
        operation: str,
        elapsed_seconds: float,
        attempts: int,
        original_error: Exception,
        kind: Optional[ErrorKind] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize retry exhaustion error.

        Args:
            operation: Public operation name
            elapsed_seconds: Wall-clock time spent since the first attempt
            attempts: Number of attempts made
            original_error: The last store error seen
            kind: Classification of the last error
            error_code: Store error code of the last error
        """
        self.elapsed_seconds = elapsed_seconds
        self.attempts = attempts
        super().__init__(
            operation,
            original_error,
            message=f"{operation} failed after {elapsed_seconds:.3f}s: {original_error}",
            kind=kind,
            error_code=error_code,
        )
        self.context = {'attempts': attempts}
