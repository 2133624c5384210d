from .config import DynamoDBConfig, RetryPolicy
from .exceptions import (
    CapacityExceededError,
    ConflictError,
    ConnectionError,
    DynamoDBPagerError,
    ErrorKind,
    MalformedKeyError,
    NotFoundError,
    OperationFailedError,
    RetryExhaustedError,
    RetryableError,
    ServiceUnavailableError,
    ThrottlingError,
    ValidationError,
)
from .models import Page
from .core import (
    # Key value objects
    CompositeKey,
    KeyPart,
    # Pagination and retries
    PaginatedReader,
    call_with_backoff,
    # TableGateway architecture
    TableGateway,
    create_table_gateway,
)
from .handlers import ItemsReadApi, ItemsWriteApi
from .pager import DynamoDBPager

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",
    "RetryPolicy",

    # Exceptions
    "CapacityExceededError",
    "ConflictError",
    "ConnectionError",
    "DynamoDBPagerError",
    "ErrorKind",
    "MalformedKeyError",
    "NotFoundError",
    "OperationFailedError",
    "RetryExhaustedError",
    "RetryableError",
    "ServiceUnavailableError",
    "ThrottlingError",
    "ValidationError",

    # Models
    "Page",
    "CompositeKey",
    "KeyPart",

    # Core
    "PaginatedReader",
    "call_with_backoff",
    "TableGateway",
    "create_table_gateway",

    # CQRS APIs
    "ItemsReadApi",
    "ItemsWriteApi",
    "DynamoDBPager",
]
