"""
Test helpers for dynamodb_pager.

- create_client_error: botocore ClientError with a given error code
- SleepRecorder: stand-in for time.sleep that records requested waits
- PagedStore: fake Query/Scan callable that serves fixed-size pages
- fail_on_calls: wrap a callable so chosen calls raise first
"""

from typing import Any, Callable, Dict, List, Optional

from botocore.exceptions import ClientError


def create_client_error(error_code: str, message: str = "Test error", operation: str = "Query") -> ClientError:
    """Helper to create ClientError for testing."""
    return ClientError(
        error_response={
            'Error': {
                'Code': error_code,
                'Message': message
            }
        },
        operation_name=operation
    )


class SleepRecorder:
    """Records every wait instead of sleeping."""

    def __init__(self):
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class PagedStore:
    """
    Serves ``items`` in pages of ``page_size`` like DynamoDB Query/Scan.

    The cursor is ``{'offset': n}``. A request Limit smaller than the page
    size shrinks the page. ``failures`` maps a page number (1-based, counted
    over successfully served pages) to exceptions raised, in order, before
    that page is served.
    """

    def __init__(
        self,
        items: List[Dict[str, Any]],
        page_size: int,
        failures: Optional[Dict[int, List[Exception]]] = None,
        ignore_limit: bool = False,
    ):
        self.items = items
        self.page_size = page_size
        self.failures = {page: list(errors) for page, errors in (failures or {}).items()}
        self.ignore_limit = ignore_limit
        self.calls: List[Dict[str, Any]] = []
        self.pages_served = 0

    def __call__(self, **kwargs) -> Dict[str, Any]:
        self.calls.append(dict(kwargs))

        pending = self.failures.get(self.pages_served + 1)
        if pending:
            raise pending.pop(0)

        start = kwargs.get('ExclusiveStartKey', {}).get('offset', 0)
        size = self.page_size
        if 'Limit' in kwargs and not self.ignore_limit:
            size = min(size, kwargs['Limit'])

        page = self.items[start:start + size]
        end = start + len(page)
        self.pages_served += 1

        response = {'Items': page, 'Count': len(page), 'ScannedCount': len(page)}
        if end < len(self.items):
            response['LastEvaluatedKey'] = {'offset': end}
        return response

    def start_offsets(self) -> List[int]:
        return [call.get('ExclusiveStartKey', {}).get('offset', 0) for call in self.calls]


def fail_on_calls(fn: Callable[..., Any], failures: Dict[int, Exception]) -> Callable[..., Any]:
    """Wrap ``fn`` so the n-th call (1-based) raises ``failures[n]`` instead."""
    state = {'calls': 0}

    def wrapper(*args, **kwargs):
        state['calls'] += 1
        if state['calls'] in failures:
            raise failures[state['calls']]
        return fn(*args, **kwargs)

    wrapper.state = state
    return wrapper
