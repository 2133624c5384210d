"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around boto3 DynamoDB operations.
Each gateway method performs exactly one wire call and nothing else:

1. No retries - the backoff layer (core.retry) decides whether to call again
2. No pagination - the paginated reader drives ExclusiveStartKey
3. Structured errors - every botocore failure is mapped to a domain exception
   that carries an ErrorKind, so callers classify errors by code, never by
   message text

The gateway focuses on:
- Creating boto3 Session/resource/Table handles lazily
- Query, Scan, PutItem and DeleteItem pass-throughs
- Error mapping from ClientError/BotoCoreError to domain exceptions
"""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import DynamoDBConfig
from ..exceptions import (
    CapacityExceededError,
    ConflictError,
    ConnectionError,
    ErrorKind,
    NotFoundError,
    ServiceUnavailableError,
    ThrottlingError,
    ValidationError,
)

logger = logging.getLogger(__name__)


# DynamoDB error codes by classification. Codes not listed are UNKNOWN.
ERROR_CODE_KINDS: Dict[str, ErrorKind] = {
    'ProvisionedThroughputExceededException': ErrorKind.CAPACITY_EXHAUSTED,

    'RequestLimitExceeded': ErrorKind.THROTTLED,
    'ThrottlingException': ErrorKind.THROTTLED,
    'TooManyRequestsException': ErrorKind.THROTTLED,

    'ValidationException': ErrorKind.VALIDATION,
    'ItemCollectionSizeLimitExceededException': ErrorKind.VALIDATION,
    'SerializationException': ErrorKind.VALIDATION,

    'AccessDeniedException': ErrorKind.ACCESS_DENIED,
    'UnrecognizedClientException': ErrorKind.ACCESS_DENIED,
    'MissingAuthenticationTokenException': ErrorKind.ACCESS_DENIED,
    'IncompleteSignatureException': ErrorKind.ACCESS_DENIED,
    'InvalidSignatureException': ErrorKind.ACCESS_DENIED,
    'ExpiredTokenException': ErrorKind.ACCESS_DENIED,

    'ResourceNotFoundException': ErrorKind.NOT_FOUND,

    'ConditionalCheckFailedException': ErrorKind.CONFLICT,
    'TransactionConflictException': ErrorKind.CONFLICT,

    'InternalServerError': ErrorKind.SERVICE_UNAVAILABLE,
    'ServiceUnavailable': ErrorKind.SERVICE_UNAVAILABLE,
    'ServiceUnavailableException': ErrorKind.SERVICE_UNAVAILABLE,

    'RequestTimeoutException': ErrorKind.NETWORK,
}


def error_code_of(error: ClientError) -> str:
    return error.response.get('Error', {}).get('Code', '')


def kind_for_error_code(error_code: str) -> ErrorKind:
    """Classify a DynamoDB error code."""
    return ERROR_CODE_KINDS.get(error_code, ErrorKind.UNKNOWN)


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map DynamoDB ClientError to domain-specific exceptions.

    Args:
        error: The boto3 ClientError
        operation: The wire operation that failed (e.g., "Query", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional resource identifier for context

    Returns:
        Domain exception whose ``kind`` and ``error_code`` reflect the
        structured error code of the response
    """
    error_code = error_code_of(error)
    error_message = error.response.get('Error', {}).get('Message', '')
    kind = kind_for_error_code(error_code)

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if kind is ErrorKind.CAPACITY_EXHAUSTED:
        return CapacityExceededError(
            f"Provisioned throughput exceeded - {full_message}",
            original_error=error, error_code=error_code
        )

    elif kind is ErrorKind.THROTTLED:
        return ThrottlingError(
            f"Throttling - {full_message}", original_error=error, error_code=error_code
        )

    elif kind is ErrorKind.VALIDATION:
        return ValidationError(
            f"Validation failed - {full_message}", original_error=error, error_code=error_code
        )

    elif kind is ErrorKind.NOT_FOUND:
        return NotFoundError(
            f"Resource not found - {full_message}",
            resource_type='table',
            resource_name=table_name,
            original_error=error,
            error_code=error_code
        )

    elif kind is ErrorKind.CONFLICT:
        return ConflictError(
            f"Conditional check failed - {full_message}", resource_id,
            original_error=error, error_code=error_code
        )

    elif kind is ErrorKind.ACCESS_DENIED:
        return ConnectionError(
            f"Authentication/authorization failed - {full_message}",
            original_error=error, kind=kind, error_code=error_code
        )

    elif kind is ErrorKind.SERVICE_UNAVAILABLE:
        return ServiceUnavailableError(
            f"Service unavailable - {full_message}", original_error=error, error_code=error_code
        )

    elif kind is ErrorKind.NETWORK:
        return ConnectionError(
            f"Request timeout - {full_message}",
            original_error=error, kind=kind, error_code=error_code
        )

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(
        f"DynamoDB operation failed - {full_message}",
        original_error=error, kind=ErrorKind.UNKNOWN, error_code=error_code
    )


def map_botocore_error(error: BotoCoreError, operation: str, table_name: str) -> ConnectionError:
    """Map transport-level botocore failures (no response from DynamoDB)."""
    return ConnectionError(
        f"{operation} on {table_name}: {error}",
        original_error=error,
        kind=ErrorKind.NETWORK
    )


class TableGateway:
    """
    Thin gateway for DynamoDB table operations.

    One method, one wire call. Retrying and pagination are layered on top by
    core.retry and core.paginator.
    """

    def __init__(self, config: DynamoDBConfig, table_name: str, dynamodb=None):
        """Initialize table gateway.

        Args:
            config: DynamoDB configuration
            table_name: Name of the DynamoDB table
            dynamodb: Optional boto3 DynamoDB service resource to share
        """
        self.config = config
        self.table_name = table_name
        self._dynamodb = dynamodb
        self._table = None

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            self._dynamodb = create_dynamodb_resource(self.config)
        return self._dynamodb

    @property
    def table(self):
        """Get boto3 DynamoDB Table resource."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except ConnectionError:
                raise
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise ConnectionError(f"Failed to access table '{self.table_name}': {e}", e) from e
        return self._table

    def query(self, **kwargs) -> Dict[str, Any]:
        """
        Execute one DynamoDB Query call.

        Args:
            **kwargs: All boto3 query parameters (KeyConditionExpression,
                IndexName, ExclusiveStartKey, Limit, ScanIndexForward, ...)

        Returns:
            Raw DynamoDB response
        """
        try:
            return self.table.query(**kwargs)
        except ClientError as e:
            raise map_dynamodb_error(e, "Query", self.table_name, kwargs.get('IndexName')) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "Query", self.table_name) from e

    def scan(self, **kwargs) -> Dict[str, Any]:
        """
        Execute one DynamoDB Scan call.

        Args:
            **kwargs: All boto3 scan parameters

        Returns:
            Raw DynamoDB response
        """
        try:
            return self.table.scan(**kwargs)
        except ClientError as e:
            raise map_dynamodb_error(e, "Scan", self.table_name) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "Scan", self.table_name) from e

    def put_item(self, item: Dict[str, Any]) -> None:
        """
        Put a full item into the table, replacing any item with the same key.

        Args:
            item: Item to store, passed to boto3 unmodified
        """
        try:
            self.table.put_item(Item=item)
            logger.debug(f"Put item in {self.table_name}")
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "PutItem", self.table_name) from e

    def delete_item(self, key: Dict[str, Any]) -> None:
        """
        Delete an item by primary key.

        Args:
            key: Primary key of item to delete
        """
        try:
            self.table.delete_item(Key=key)
            logger.debug(f"Deleted item from {self.table_name}: {key}")
        except ClientError as e:
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, str(key)) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "DeleteItem", self.table_name) from e


def create_dynamodb_resource(config: DynamoDBConfig):
    """Create a boto3 DynamoDB service resource from configuration."""
    try:
        session = boto3.Session(
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
            region_name=config.region_name
        )

        dynamodb_config = {
            'region_name': config.region_name
        }

        if config.endpoint_url:
            dynamodb_config['endpoint_url'] = config.endpoint_url

        boto_config = Config(
            retries={'max_attempts': config.retries},
            max_pool_connections=config.max_pool_connections,
            read_timeout=config.timeout_seconds,
            connect_timeout=config.timeout_seconds
        )
        dynamodb_config['config'] = boto_config

        return session.resource('dynamodb', **dynamodb_config)
    except Exception as e:
        logger.error(f"Failed to create DynamoDB resource: {e}")
        raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e


def create_table_gateway(config: DynamoDBConfig, table_name: str, dynamodb=None) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: DynamoDB configuration
        table_name: Base table name (``config.table_prefix`` is applied)
        dynamodb: Optional shared boto3 DynamoDB resource

    Returns:
        Configured TableGateway instance
    """
    full_table_name = config.get_table_name(table_name)
    return TableGateway(config, full_table_name, dynamodb=dynamodb)
