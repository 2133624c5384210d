"""Single entry point combining the item read and write APIs."""

from typing import Any, Callable, Dict, List, Optional, Union

from .config import DynamoDBConfig, RetryPolicy
from .core import KeyPart, TableGateway
from .handlers import ItemsReadApi, ItemsWriteApi


class DynamoDBPager:
    """
    Facade exposing get_items, get_index_items, scan_items, put_item and
    delete_item on one object. Both APIs share the same configuration,
    retry policy and boto3 resource.
    """

    def __init__(
        self,
        config: Optional[DynamoDBConfig] = None,
        retry_policy: Optional[RetryPolicy] = None,
        gateway_factory: Optional[Callable[[str], TableGateway]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.reads = ItemsReadApi(config, retry_policy, gateway_factory, sleep)
        self.writes = ItemsWriteApi(self.reads.config, self.reads.retry_policy, self.reads.gateway, sleep)

    @property
    def config(self) -> DynamoDBConfig:
        return self.reads.config

    def get_items(
        self,
        table: str,
        partition_key: Union[KeyPart, str],
        sort_key: Union[KeyPart, str, None] = "",
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        return self.reads.get_items(table, partition_key, sort_key, limit)

    def get_index_items(self, table: str, index_name: str, key_attribute: str, value: str) -> List[Dict[str, Any]]:
        return self.reads.get_index_items(table, index_name, key_attribute, value)

    def scan_items(self, table: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        return self.reads.scan_items(table, limit)

    def put_item(self, table: str, item: Dict[str, Any]) -> None:
        self.writes.put_item(table, item)

    def delete_item(
        self,
        table: str,
        partition_key: Union[KeyPart, str],
        sort_key: Union[KeyPart, str, None] = ""
    ) -> None:
        self.writes.delete_item(table, partition_key, sort_key)
