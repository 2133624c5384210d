"""
Page model for paginated DynamoDB reads.

A Page is the result of a single Query or Scan call: the items it returned,
in order, and the continuation cursor if the store has more data.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Page(BaseModel):
    """One page of a Query or Scan response."""

    items: List[Dict[str, Any]] = Field(default_factory=list, description="Records in fetch order")
    last_evaluated_key: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Continuation cursor; present only when more data exists"
    )
    count: int = Field(default=0, description="Number of items returned")
    scanned_count: int = Field(default=0, description="Number of items evaluated before filtering")

    @property
    def has_more(self) -> bool:
        return self.last_evaluated_key is not None

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> 'Page':
        """Build a Page from a raw boto3 query/scan response."""
        items = response.get('Items', [])
        return cls(
            items=items,
            last_evaluated_key=response.get('LastEvaluatedKey') or None,
            count=response.get('Count', len(items)),
            scanned_count=response.get('ScannedCount', len(items)),
        )

    model_config = ConfigDict(frozen=True)
