"""
Items Write API

Single-item writes by full record or by key. No condition expressions are
added; each call is retried on capacity errors like a page fetch.
"""

import logging
from typing import Any, Dict, Union

from ...core import CompositeKey, KeyPart, build_delete, build_put, call_with_backoff
from .base import ItemsApiBase

logger = logging.getLogger(__name__)


class ItemsWriteApi(ItemsApiBase):
    """Write-only API for single-item mutations."""

    def put_item(self, table: str, item: Dict[str, Any]) -> None:
        """
        Store a full item, replacing any item with the same key.

        DynamoDB Operation: PutItem

        Args:
            table: Table name
            item: Complete item, passed to DynamoDB unmodified

        Raises:
            ValidationError: Item is not a non-empty dictionary
            OperationFailedError: DynamoDB rejected the write
            RetryExhaustedError: Capacity errors outlasted the backoff schedule
        """
        request = build_put(item)

        gateway = self.gateway(table)
        call_with_backoff(
            "PutItem",
            lambda: gateway.put_item(request['Item']),
            self.retry_policy,
            self.sleep,
        )
        logger.info(f"Put item in {gateway.table_name}")

    def delete_item(
        self,
        table: str,
        partition_key: Union[KeyPart, str],
        sort_key: Union[KeyPart, str, None] = ""
    ) -> None:
        """
        Delete an item by key.

        DynamoDB Operation: DeleteItem

        Args:
            table: Table name
            partition_key: ``"attribute:value"`` or KeyPart
            sort_key: ``"attribute:value"`` or KeyPart; empty for tables
                without a sort key

        Raises:
            MalformedKeyError: A key expression has no ``:`` separator
            OperationFailedError: DynamoDB rejected the delete
            RetryExhaustedError: Capacity errors outlasted the backoff schedule
        """
        key = CompositeKey.parse(partition_key, sort_key)
        request = build_delete(key)

        gateway = self.gateway(table)
        call_with_backoff(
            "DeleteItem",
            lambda: gateway.delete_item(request['Key']),
            self.retry_policy,
            self.sleep,
        )
        logger.info(f"Deleted item from {gateway.table_name}: {request['Key']}")
