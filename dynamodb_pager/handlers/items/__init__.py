"""
Item CQRS APIs

Read API:
- Query by partition key with optional sort key prefix
- Query on a secondary index
- Scan with an optional result limit

Write API:
- PutItem of a full record
- DeleteItem by partition key and optional sort key

Usage:
    from .queries import ItemsReadApi
    from .commands import ItemsWriteApi

    read_api = ItemsReadApi(config)
    write_api = ItemsWriteApi(config)
"""

from .queries import ItemsReadApi
from .commands import ItemsWriteApi

__all__ = [
    "ItemsReadApi",
    "ItemsWriteApi",
]
