"""
Handler Layer for dynamodb_pager

Implements the public operations on top of core/ following Command Query
Responsibility Segregation: queries.py holds reads, commands.py holds writes.

Architecture:
handlers/ (this layer) -> core/ (pagination, retries, gateway) -> DynamoDB
"""

from .items.queries import ItemsReadApi
from .items.commands import ItemsWriteApi

__all__ = [
    'ItemsReadApi',
    'ItemsWriteApi',
]
