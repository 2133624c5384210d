"""
Retrying wire calls with exponential backoff.

Retries are for capacity exhaustion only (ProvisionedThroughputExceededException)
unless the RetryPolicy says otherwise. Validation, permission, not-found and
network errors fail on first occurrence.

Every call builds its own tenacity.Retrying, so attempt counts and waits are
never shared between pages or between independent operations.
"""

import logging
import time
from typing import Callable, Optional, TypeVar

from botocore.exceptions import ClientError
from tenacity import (
    RetryError,
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    stop_after_delay,
    wait_exponential,
    wait_random,
)

from ..config import RetryPolicy
from ..exceptions import (
    DynamoDBPagerError,
    ErrorKind,
    OperationFailedError,
    RetryExhaustedError,
)
from .table_gateway import error_code_of, kind_for_error_code

logger = logging.getLogger(__name__)

T = TypeVar('T')


def classify_error(error: BaseException) -> Optional[ErrorKind]:
    """Return the ErrorKind of a store error, or None for anything else.

    Uses the structured classification of domain exceptions, or the error
    code of a raw botocore ClientError.
    """
    if isinstance(error, DynamoDBPagerError):
        return error.kind
    if isinstance(error, ClientError):
        return kind_for_error_code(error_code_of(error))
    return None


def build_retrying(policy: RetryPolicy, sleep: Optional[Callable[[float], None]] = None) -> Retrying:
    """Translate a RetryPolicy into a fresh tenacity.Retrying."""
    stop = stop_after_delay(policy.max_elapsed_seconds)
    if policy.max_attempts is not None:
        stop = stop | stop_after_attempt(policy.max_attempts)

    wait = wait_exponential(
        multiplier=policy.initial_interval,
        exp_base=policy.multiplier,
        max=policy.max_interval,
    )
    if policy.jitter_seconds:
        wait = wait + wait_random(0, policy.jitter_seconds)

    retrying_kwargs = {
        'stop': stop,
        'wait': wait,
        'retry': retry_if_exception(lambda e: policy.is_retriable(classify_error(e))),
        'before_sleep': before_sleep_log(logger, logging.WARNING),
        'reraise': False,
    }
    if sleep is not None:
        retrying_kwargs['sleep'] = sleep
    return Retrying(**retrying_kwargs)


def call_with_backoff(
    operation: str,
    attempt: Callable[[], T],
    policy: Optional[RetryPolicy] = None,
    sleep: Optional[Callable[[float], None]] = None,
    started_at: Optional[float] = None,
) -> T:
    """
    Invoke ``attempt`` until it succeeds, fails terminally, or the schedule gives up.

    Args:
        operation: Public operation name used to prefix errors
        attempt: Zero-argument callable performing exactly one wire call
        policy: Backoff schedule; a default RetryPolicy when omitted
        sleep: Replacement for time.sleep between attempts
        started_at: time.monotonic() value at which the whole operation
            began; the reported elapsed time is measured from it. The
            retry schedule itself always starts with this call.

    Returns:
        Whatever the first successful attempt returned

    Raises:
        OperationFailedError: The attempt raised a non-retriable store error
        RetryExhaustedError: Retriable errors persisted past the schedule
    """
    policy = policy or RetryPolicy()
    retrying = build_retrying(policy, sleep)
    start = time.monotonic() if started_at is None else started_at

    try:
        return retrying(attempt)
    except RetryError as e:
        last_attempt = e.last_attempt
        last_error = last_attempt.exception()
        elapsed = time.monotonic() - start
        logger.error(
            f"{operation} gave up after {last_attempt.attempt_number} attempts "
            f"in {elapsed:.3f}s: {last_error}"
        )
        raise RetryExhaustedError(
            operation,
            elapsed,
            last_attempt.attempt_number,
            last_error,
            kind=classify_error(last_error),
            error_code=_error_code(last_error),
        ) from last_error
    except OperationFailedError:
        raise
    except (DynamoDBPagerError, ClientError) as e:
        raise OperationFailedError(
            operation,
            e,
            kind=classify_error(e),
            error_code=_error_code(e),
        ) from e


def _error_code(error: BaseException) -> Optional[str]:
    if isinstance(error, ClientError):
        return error_code_of(error)
    return getattr(error, 'error_code', None)
