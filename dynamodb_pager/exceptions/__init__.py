# Base exception and error classification
from .base import DynamoDBPagerError, ErrorKind

from .domain_exceptions import (
    ValidationError,
    MalformedKeyError,
    RetryableError,
    CapacityExceededError,
    ThrottlingError,
    ConnectionError,
    NotFoundError,
    ConflictError,
    ServiceUnavailableError,
    OperationFailedError,
    RetryExhaustedError,
)

__all__ = [
    # Base exception
    "DynamoDBPagerError",
    "ErrorKind",

    # Domain exceptions (alphabetically ordered)
    "CapacityExceededError",
    "ConflictError",
    "ConnectionError",
    "MalformedKeyError",
    "NotFoundError",
    "OperationFailedError",
    "RetryExhaustedError",
    "RetryableError",
    "ServiceUnavailableError",
    "ThrottlingError",
    "ValidationError",
]
