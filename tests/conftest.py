"""
Test configuration and fixtures for dynamodb_pager.

Provides mocked DynamoDB tables (moto), zero-wait retry policies and a
paged fake store for exercising pagination without AWS.
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import dynamodb_pager
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from dynamodb_pager import DynamoDBConfig, ItemsReadApi, ItemsWriteApi, RetryPolicy
from tests.helpers import SleepRecorder


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    for name in (
        "DYNAMODB_ENDPOINT_URL",
        "DYNAMODB_TABLE_PREFIX",
        "DYNAMODB_BACKOFF_INITIAL_INTERVAL",
        "DYNAMODB_BACKOFF_MULTIPLIER",
        "DYNAMODB_BACKOFF_MAX_INTERVAL",
        "DYNAMODB_BACKOFF_MAX_ELAPSED",
        "DYNAMODB_BACKOFF_MAX_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fast_retry_policy():
    """Retry policy that never waits and gives up after 5 attempts."""
    return RetryPolicy(
        initial_interval=0.0,
        multiplier=1.0,
        max_interval=0.0,
        max_elapsed_seconds=60.0,
        max_attempts=5,
    )


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def mock_dynamodb_config(fast_retry_policy):
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        table_prefix="",
        retry_policy=fast_retry_policy,
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def events_table(mock_dynamodb_resource):
    """Create an events table keyed by pk (HASH) and sk (RANGE) with a GSI on status."""
    table = mock_dynamodb_resource.create_table(
        TableName='events',
        KeySchema=[
            {'AttributeName': 'pk', 'KeyType': 'HASH'},
            {'AttributeName': 'sk', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'pk', 'AttributeType': 'S'},
            {'AttributeName': 'sk', 'AttributeType': 'S'},
            {'AttributeName': 'status', 'AttributeType': 'S'},
            {'AttributeName': 'created_at', 'AttributeType': 'S'}
        ],
        GlobalSecondaryIndexes=[
            {
                'IndexName': 'StatusIndex',
                'KeySchema': [
                    {'AttributeName': 'status', 'KeyType': 'HASH'},
                    {'AttributeName': 'created_at', 'KeyType': 'RANGE'}
                ],
                'Projection': {'ProjectionType': 'ALL'}
            }
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    return table


@pytest.fixture
def sessions_table(mock_dynamodb_resource):
    """Create a sessions table with a partition key only."""
    return mock_dynamodb_resource.create_table(
        TableName='sessions',
        KeySchema=[{'AttributeName': 'session_id', 'KeyType': 'HASH'}],
        AttributeDefinitions=[{'AttributeName': 'session_id', 'AttributeType': 'S'}],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def populated_events_table(events_table):
    """Ten events for user#1 and three for user#2."""
    with events_table.batch_writer() as batch:
        for i in range(1, 11):
            batch.put_item(Item={
                'pk': 'user#1',
                'sk': f"order#{i:03d}",
                'status': 'OPEN' if i % 2 else 'CLOSED',
                'created_at': f"2024-01-{i:02d}T00:00:00Z",
            })
        for i in range(1, 4):
            batch.put_item(Item={
                'pk': 'user#2',
                'sk': f"invoice#{i:03d}",
                'status': 'OPEN',
                'created_at': f"2024-02-{i:02d}T00:00:00Z",
            })
    return events_table


@pytest.fixture
def items_read_api(mock_dynamodb_config, mock_dynamodb_resource):
    """Items read API backed by moto."""
    return ItemsReadApi(mock_dynamodb_config)


@pytest.fixture
def items_write_api(mock_dynamodb_config, mock_dynamodb_resource):
    """Items write API backed by moto."""
    return ItemsWriteApi(mock_dynamodb_config)
