from .config import DynamoDBConfig
from .retry_policy import RetryPolicy

__all__ = ["DynamoDBConfig", "RetryPolicy"]
