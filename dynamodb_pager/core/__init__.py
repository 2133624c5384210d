"""
Core infrastructure components for DynamoDB operations.

This module contains the building blocks used by the item APIs:
- TableGateway: Thin wrapper over boto3 DynamoDB operations, one wire call per method
- call_with_backoff: Exponential backoff around a single wire call
- PaginatedReader: Query/Scan pagination with per-page retries and result limits
- CompositeKey/KeyPart: Parsed ``attribute:value`` key expressions
- Request builders for Query, Scan, PutItem and DeleteItem
"""

from .keys import CompositeKey, KeyPart
from .paginator import PaginatedReader
from .requests import (
    build_delete,
    build_index_query,
    build_key_condition,
    build_key_query,
    build_put,
    build_scan,
    validate_limit,
)
from .retry import build_retrying, call_with_backoff, classify_error
from .table_gateway import (
    TableGateway,
    create_dynamodb_resource,
    create_table_gateway,
    kind_for_error_code,
    map_dynamodb_error,
)

__all__ = [
    "CompositeKey",
    "KeyPart",
    "PaginatedReader",
    "TableGateway",
    "build_delete",
    "build_index_query",
    "build_key_condition",
    "build_key_query",
    "build_put",
    "build_retrying",
    "build_scan",
    "call_with_backoff",
    "classify_error",
    "create_dynamodb_resource",
    "create_table_gateway",
    "kind_for_error_code",
    "map_dynamodb_error",
    "validate_limit",
]
