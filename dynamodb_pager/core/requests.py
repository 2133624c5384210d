"""
Request builders for Query, Scan, PutItem and DeleteItem.

Builders return plain boto3 keyword-argument dictionaries. The paginated
reader copies them per page and adds ExclusiveStartKey/Limit, so a built
request is a template and is never mutated.

Key conditions:
- partition only:   Key(pk).eq(value)
- partition + sort: Key(pk).eq(value) & Key(sk).begins_with(prefix)
- secondary index:  Key(attr).eq(value) on IndexName
"""

from typing import Any, Dict, Optional

from boto3.dynamodb.conditions import Key

from ..exceptions import ValidationError
from .keys import CompositeKey


def validate_limit(limit: Optional[int]) -> Optional[int]:
    """Normalize a result limit: None and 0 mean "no limit"."""
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValidationError(f"Limit must be an integer, got {limit!r}", errors={'limit': limit})
    if limit < 0:
        raise ValidationError(f"Limit cannot be negative, got {limit}", errors={'limit': limit})
    return limit or None


def build_key_condition(key: CompositeKey):
    """Equality on the partition attribute, prefix match on the sort attribute."""
    condition = Key(key.partition.attribute_name).eq(key.partition.attribute_value)
    if key.sort is not None:
        condition = condition & Key(key.sort.attribute_name).begins_with(key.sort.attribute_value)
    return condition


def build_key_query(key: CompositeKey, scan_index_forward: bool = False) -> Dict[str, Any]:
    """Query request on the table's primary key, newest first by default."""
    return {
        'KeyConditionExpression': build_key_condition(key),
        'ScanIndexForward': scan_index_forward,
    }


def build_index_query(
    index_name: str,
    key_attribute: str,
    value: str,
    scan_index_forward: bool = False
) -> Dict[str, Any]:
    """Query request on a secondary index keyed by a single attribute."""
    if not index_name:
        raise ValidationError("Index name cannot be empty")
    if not key_attribute:
        raise ValidationError("Index key attribute cannot be empty")

    return {
        'IndexName': index_name,
        'KeyConditionExpression': Key(key_attribute).eq(value),
        'ScanIndexForward': scan_index_forward,
    }


def build_scan() -> Dict[str, Any]:
    return {}


def build_put(item: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(item, dict) or not item:
        raise ValidationError("Item must be a non-empty dictionary")
    return {'Item': item}


def build_delete(key: CompositeKey) -> Dict[str, Any]:
    return {'Key': key.to_key()}
