"""Shared wiring for the item read and write APIs."""

import logging
from typing import Callable, Optional

from ...config import DynamoDBConfig, RetryPolicy
from ...core import TableGateway, create_dynamodb_resource, create_table_gateway

logger = logging.getLogger(__name__)

GatewayFactory = Callable[[str], TableGateway]


class ItemsApiBase:
    """Holds configuration, the retry policy and gateway creation."""

    def __init__(
        self,
        config: Optional[DynamoDBConfig] = None,
        retry_policy: Optional[RetryPolicy] = None,
        gateway_factory: Optional[GatewayFactory] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        """Initialize API with configuration.

        Args:
            config: DynamoDB configuration (read from the environment if None)
            retry_policy: Backoff schedule; defaults to ``config.retry_policy``
            gateway_factory: Builds a TableGateway for a table name; used to
                inject test doubles
            sleep: Replacement for time.sleep between retries
        """
        self.config = config or DynamoDBConfig.from_env()
        self.retry_policy = retry_policy or self.config.retry_policy
        self.gateway_factory = gateway_factory
        self.sleep = sleep
        self._dynamodb = None
        self.config.configure_logging()

    @property
    def dynamodb(self):
        """boto3 DynamoDB resource shared by all gateways of this API."""
        if self._dynamodb is None:
            self._dynamodb = create_dynamodb_resource(self.config)
        return self._dynamodb

    def gateway(self, table: str) -> TableGateway:
        """Gateway for one table; creating it performs no wire call."""
        if self.gateway_factory is not None:
            return self.gateway_factory(table)
        return create_table_gateway(self.config, table, dynamodb=self.dynamodb)
