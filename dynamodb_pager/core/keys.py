"""
Composite key value objects.

A key part associates a key-schema attribute name with a string value. It is
written compactly as ``"attribute:value"`` and parsed once, up front, so a
malformed expression fails before any wire call is attempted.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import MalformedKeyError

KEY_SEPARATOR = ":"


class KeyPart(BaseModel):
    """One component of a primary key: ``{attribute_name: attribute_value}``."""

    attribute_name: str = Field(description="Key-schema attribute name")
    attribute_value: str = Field(description="String value of the attribute")

    @field_validator('attribute_name')
    @classmethod
    def validate_attribute_name(cls, v):
        """Validate attribute name."""
        if not v or not v.strip():
            raise ValueError("Attribute name cannot be empty")
        return v

    @classmethod
    def parse(cls, expression: str) -> 'KeyPart':
        """Parse an ``attribute:value`` expression.

        The expression is split on the first colon only, so values may
        contain colons themselves (e.g. ``created_at:2024-01-01T10:00``).

        Raises:
            MalformedKeyError: No colon, or nothing before it
        """
        if not isinstance(expression, str):
            raise MalformedKeyError(repr(expression), "expected a string")

        name, separator, value = expression.partition(KEY_SEPARATOR)
        if not separator:
            raise MalformedKeyError(expression, "missing ':' separator")
        if not name.strip():
            raise MalformedKeyError(expression, "empty attribute name")
        return cls(attribute_name=name, attribute_value=value)

    def as_item(self) -> Dict[str, str]:
        return {self.attribute_name: self.attribute_value}

    def __str__(self) -> str:
        return f"{self.attribute_name}{KEY_SEPARATOR}{self.attribute_value}"

    model_config = ConfigDict(frozen=True)


KeyPartLike = Union[KeyPart, str, None]


class CompositeKey(BaseModel):
    """Partition key part plus optional sort key part."""

    partition: KeyPart
    sort: Optional[KeyPart] = None

    @classmethod
    def parse(cls, partition_key: Union[KeyPart, str], sort_key: KeyPartLike = None) -> 'CompositeKey':
        """Build a CompositeKey from expressions or KeyPart instances.

        An empty or None ``sort_key`` means the key has no sort part.
        """
        partition = partition_key if isinstance(partition_key, KeyPart) else KeyPart.parse(partition_key)

        sort = None
        if isinstance(sort_key, KeyPart):
            sort = sort_key
        elif sort_key:
            sort = KeyPart.parse(sort_key)

        return cls(partition=partition, sort=sort)

    @property
    def has_sort(self) -> bool:
        return self.sort is not None

    def to_key(self) -> Dict[str, Any]:
        """Key dictionary for GetItem/DeleteItem style calls."""
        key = self.partition.as_item()
        if self.sort is not None:
            key.update(self.sort.as_item())
        return key

    model_config = ConfigDict(frozen=True)
