"""
Tests for request builders (core/requests.py).
"""

import pytest

from dynamodb_pager.core.keys import CompositeKey
from dynamodb_pager.core.requests import (
    build_delete,
    build_index_query,
    build_key_condition,
    build_key_query,
    build_put,
    build_scan,
    validate_limit,
)
from dynamodb_pager.exceptions import ValidationError


def describe(condition):
    """Flatten a boto3 condition into (operator, attribute, value) tuples."""
    expression = condition.get_expression()
    if expression['operator'] == 'AND':
        left, right = expression['values']
        return describe(left) + describe(right)
    attribute, value = expression['values']
    return [(expression['operator'], attribute.name, value)]


class TestKeyQuery:
    """Test primary key query construction."""

    def test_partition_only_uses_equality(self):
        request = build_key_query(CompositeKey.parse("pk:123"))

        assert describe(request['KeyConditionExpression']) == [('=', 'pk', '123')]

    def test_sort_key_uses_begins_with(self):
        request = build_key_query(CompositeKey.parse("pk:123", "sk:order#"))

        assert describe(request['KeyConditionExpression']) == [
            ('=', 'pk', '123'),
            ('begins_with', 'sk', 'order#'),
        ]

    def test_descending_by_default(self):
        request = build_key_query(CompositeKey.parse("pk:123"))

        assert request['ScanIndexForward'] is False

    def test_ascending_extension_point(self):
        request = build_key_query(CompositeKey.parse("pk:123"), scan_index_forward=True)

        assert request['ScanIndexForward'] is True

    def test_no_pagination_fields_in_template(self):
        request = build_key_query(CompositeKey.parse("pk:123"))

        assert 'Limit' not in request
        assert 'ExclusiveStartKey' not in request
        assert 'IndexName' not in request

    def test_build_key_condition_matches_query(self):
        key = CompositeKey.parse("pk:1", "sk:2")

        assert describe(build_key_condition(key)) == describe(build_key_query(key)['KeyConditionExpression'])


class TestIndexQuery:
    """Test secondary index query construction."""

    def test_index_equality(self):
        request = build_index_query("StatusIndex", "status", "OPEN")

        assert request['IndexName'] == "StatusIndex"
        assert describe(request['KeyConditionExpression']) == [('=', 'status', 'OPEN')]
        assert request['ScanIndexForward'] is False

    def test_index_name_required(self):
        with pytest.raises(ValidationError, match="Index name"):
            build_index_query("", "status", "OPEN")

    def test_key_attribute_required(self):
        with pytest.raises(ValidationError, match="key attribute"):
            build_index_query("StatusIndex", "", "OPEN")


class TestWriteRequests:
    """Test put and delete construction."""

    def test_delete_partition_only(self):
        request = build_delete(CompositeKey.parse("pk:123", ""))

        assert request == {'Key': {'pk': '123'}}

    def test_delete_partition_and_sort(self):
        request = build_delete(CompositeKey.parse("pk:123", "sk:456"))

        assert request == {'Key': {'pk': '123', 'sk': '456'}}

    def test_put_passes_item_through(self):
        item = {'pk': '1', 'payload': {'nested': [1, 2]}}

        request = build_put(item)

        assert request == {'Item': item}
        assert request['Item'] is item
        assert 'ConditionExpression' not in request

    @pytest.mark.parametrize("item", [{}, None, "pk:1"])
    def test_put_rejects_empty_or_non_dict(self, item):
        with pytest.raises(ValidationError):
            build_put(item)

    def test_scan_template_is_empty(self):
        assert build_scan() == {}


class TestValidateLimit:
    """Test limit normalization."""

    @pytest.mark.parametrize("limit, expected", [(None, None), (0, None), (1, 1), (25, 25)])
    def test_normalization(self, limit, expected):
        assert validate_limit(limit) == expected

    def test_negative_limit(self):
        with pytest.raises(ValidationError, match="negative"):
            validate_limit(-1)

    @pytest.mark.parametrize("limit", ["10", 1.5, True])
    def test_non_integer_limit(self, limit):
        with pytest.raises(ValidationError, match="integer"):
            validate_limit(limit)
