"""
Retry-aware pagination for Query and Scan.

The reader drives one logical read to completion:

    cursor = None
    loop:
        request = template + ExclusiveStartKey(cursor) + Limit(remaining)
        page = call_with_backoff(fetch_page(request))   # retries this page only
        accumulate page.items
        stop when there is no cursor, or when the limit is reached
            (the cursor is dropped in that case)

Pages are fetched strictly one after another since each request depends on
the previous cursor. Any error aborts the whole read; pages fetched before
the failure are discarded.
"""

import logging
import time
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..config import RetryPolicy
from ..models import Page
from .requests import validate_limit
from .retry import call_with_backoff

logger = logging.getLogger(__name__)

FetchPage = Callable[..., Dict[str, Any]]


class PaginatedReader:
    """
    Drives a Query or Scan across pages with per-page retries.

    Args:
        operation: Public operation name used to prefix errors
        fetch_page: Callable performing one wire call with boto3 kwargs,
            typically TableGateway.query or TableGateway.scan
        retry_policy: Backoff schedule applied to every page fetch
        sleep: Optional replacement for time.sleep between retries
    """

    def __init__(
        self,
        operation: str,
        fetch_page: FetchPage,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.operation = operation
        self.fetch_page = fetch_page
        self.retry_policy = retry_policy or RetryPolicy()
        self.sleep = sleep

    def _fetch(self, request: Dict[str, Any], started_at: float) -> Page:
        response = call_with_backoff(
            self.operation,
            lambda: self.fetch_page(**request),
            self.retry_policy,
            self.sleep,
            started_at=started_at,
        )
        return Page.from_response(response)

    def iter_pages(self, request: Dict[str, Any], limit: Optional[int] = None) -> Iterator[Page]:
        """
        Yield pages in fetch order until the cursor runs out or ``limit`` is reached.

        With a limit, each request asks for at most the remaining number of
        items and the final page is trimmed so that no more than ``limit``
        items are yielded in total.

        Args:
            request: boto3 kwargs template; it is copied, never mutated
            limit: Maximum number of items across all pages; None/0 for all
        """
        limit = validate_limit(limit)
        started_at = time.monotonic()
        cursor: Optional[Dict[str, Any]] = None
        fetched = 0
        page_number = 0

        while True:
            page_request = dict(request)
            if cursor is not None:
                page_request['ExclusiveStartKey'] = cursor
            if limit is not None:
                page_request['Limit'] = limit - fetched

            page = self._fetch(page_request, started_at)
            page_number += 1

            items = page.items
            if limit is not None and fetched + len(items) > limit:
                items = items[:limit - fetched]
                page = page.model_copy(update={'items': items, 'count': len(items)})
            fetched += len(items)

            logger.debug(
                f"{self.operation} page {page_number}: {len(items)} items, "
                f"{fetched} total, more={page.has_more}"
            )

            cursor = page.last_evaluated_key
            if limit is not None and fetched >= limit:
                cursor = None
                page = page.model_copy(update={'last_evaluated_key': None})

            yield page

            if cursor is None:
                return

    def read_all(self, request: Dict[str, Any], limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Materialize every item of a paginated read.

        Returns:
            Items of all pages, concatenated in fetch order

        Raises:
            OperationFailedError: A page failed terminally; nothing is returned
            RetryExhaustedError: A page kept failing with retriable errors
        """
        items: List[Dict[str, Any]] = []
        pages = 0
        for page in self.iter_pages(request, limit):
            items.extend(page.items)
            pages += 1

        logger.debug(f"{self.operation} returned {len(items)} items in {pages} pages")
        return items
