#!/usr/bin/env python3
"""
Basic usage examples for dynamodb_pager.

This example demonstrates:
1. Setting up configuration and a retry policy
2. Writing items with the write API
3. Reading a partition, a sort key prefix and a secondary index
4. Scanning with a result limit
5. Handling operation errors
"""

from dynamodb_pager import (
    DynamoDBConfig,
    ItemsReadApi,
    ItemsWriteApi,
    MalformedKeyError,
    OperationFailedError,
    RetryExhaustedError,
    RetryPolicy,
)


def main():
    """Demonstrate basic usage of the paginated DynamoDB APIs."""

    # 1. Configure DynamoDB connection
    print("1. Setting up DynamoDB configuration...")
    config = DynamoDBConfig.from_env()  # Uses environment variables

    # For local development, you might use:
    # config = DynamoDBConfig.for_local_development()

    # Give up on capacity errors after two minutes instead of fifteen
    retry_policy = RetryPolicy(max_elapsed_seconds=120.0)

    # 2. Initialize CQRS APIs (separate read/write)
    print("2. Initializing APIs...")
    read_api = ItemsReadApi(config, retry_policy=retry_policy)
    write_api = ItemsWriteApi(config, retry_policy=retry_policy)

    # 3. Write a few orders
    print("3. Writing orders...")
    for i in range(1, 6):
        write_api.put_item("orders", {
            'customer_id': 'customer#42',
            'order_key': f"2024-05-0{i}#order-{i}",
            'status': 'SHIPPED' if i % 2 else 'PENDING',
        })

    # 4. Read them back, newest first
    print("4. Reading orders...")
    orders = read_api.get_items("orders", "customer_id:customer#42")
    print(f"   All orders: {[o['order_key'] for o in orders]}")

    latest_two = read_api.get_items("orders", "customer_id:customer#42", limit=2)
    print(f"   Latest two: {[o['order_key'] for o in latest_two]}")

    may_third = read_api.get_items("orders", "customer_id:customer#42", "order_key:2024-05-03")
    print(f"   Orders on 2024-05-03: {len(may_third)}")

    pending = read_api.get_index_items("orders", "StatusIndex", "status", "PENDING")
    print(f"   Pending orders: {len(pending)}")

    # 5. Scan with a limit
    print("5. Scanning...")
    sample = read_api.scan_items("orders", limit=3)
    print(f"   Sampled {len(sample)} items")

    # 6. Error handling
    print("6. Error handling...")
    try:
        read_api.get_items("orders", "customer_id-without-separator")
    except MalformedKeyError as e:
        print(f"   Rejected before any request: {e}")

    try:
        write_api.delete_item("orders", "customer_id:customer#42", "order_key:2024-05-01#order-1")
    except RetryExhaustedError as e:
        print(f"   Still throttled after {e.elapsed_seconds:.1f}s: {e.original_error}")
    except OperationFailedError as e:
        print(f"   {e.operation} failed ({e.kind.value}): {e}")

    print("Done.")


if __name__ == "__main__":
    main()
