"""
Items Read API

This module provides fully materialized reads over any table:
- Query by partition key, optionally narrowed by a sort key prefix
- Query on a secondary index by a single attribute value
- Scan of the whole table

Pagination and retries of capacity errors are handled internally, so every
method returns a plain list of items or raises a single exception.
Results are newest first (ScanIndexForward=False) for Query operations.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from ...core import (
    CompositeKey,
    KeyPart,
    PaginatedReader,
    build_index_query,
    build_key_query,
    build_scan,
    validate_limit,
)
from .base import ItemsApiBase

logger = logging.getLogger(__name__)


class ItemsReadApi(ItemsApiBase):
    """
    Read-only API for paginated item queries.

    Uses:
    - KeyConditionExpression with begins_with for sort key prefixes
    - IndexName for secondary index reads
    - ExclusiveStartKey/LastEvaluatedKey to walk every page
    - Limit as a cap on the total result, not just the page size
    """

    def _reader(self, operation: str, fetch_page) -> PaginatedReader:
        return PaginatedReader(operation, fetch_page, self.retry_policy, self.sleep)

    def get_items(
        self,
        table: str,
        partition_key: Union[KeyPart, str],
        sort_key: Union[KeyPart, str, None] = "",
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Get items by partition key, optionally filtered by sort key prefix.

        DynamoDB Operation: Query with KeyConditionExpression
        Condition: pk = :pk [AND begins_with(sk, :sk)]

        Args:
            table: Table name
            partition_key: ``"attribute:value"`` or KeyPart for the partition key
            sort_key: ``"attribute:value"`` or KeyPart; the value is matched as
                a prefix. Empty or None to query the whole partition.
            limit: Maximum number of items to return; None or 0 for all

        Returns:
            Items in descending sort key order

        Raises:
            MalformedKeyError: A key expression has no ``:`` separator
            OperationFailedError: DynamoDB rejected a page
            RetryExhaustedError: Capacity errors outlasted the backoff schedule
        """
        key = CompositeKey.parse(partition_key, sort_key)
        limit = validate_limit(limit)
        request = build_key_query(key)

        gateway = self.gateway(table)
        items = self._reader("GetItems", gateway.query).read_all(request, limit)
        logger.info(f"GetItems on {gateway.table_name} ({key.partition}) returned {len(items)} items")
        return items

    def get_index_items(
        self,
        table: str,
        index_name: str,
        key_attribute: str,
        value: str
    ) -> List[Dict[str, Any]]:
        """
        Get all items whose index key equals ``value``.

        DynamoDB Operation: Query on a GSI/LSI
        Condition: key_attribute = :v

        Args:
            table: Table name
            index_name: Secondary index name
            key_attribute: Partition key attribute of the index
            value: Value to match

        Returns:
            Items in descending index sort key order
        """
        request = build_index_query(index_name, key_attribute, value)

        gateway = self.gateway(table)
        items = self._reader("GetIndexItems", gateway.query).read_all(request)
        logger.info(
            f"GetIndexItems on {gateway.table_name}.{index_name} "
            f"({key_attribute}={value}) returned {len(items)} items"
        )
        return items

    def scan_items(self, table: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Scan the table.

        DynamoDB Operation: Scan

        Args:
            table: Table name
            limit: Maximum number of items to return; None or 0 for all

        Returns:
            Items in scan order
        """
        limit = validate_limit(limit)
        if limit is None:
            logger.warning(f"ScanItems on {table} without limit reads the whole table")

        gateway = self.gateway(table)
        items = self._reader("ScanItems", gateway.scan).read_all(build_scan(), limit)
        logger.info(f"ScanItems on {gateway.table_name} returned {len(items)} items")
        return items
