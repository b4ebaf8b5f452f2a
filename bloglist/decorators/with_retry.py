"""
Retry decorator for transient failures.

Used where an operation can fail for reasons unrelated to its input: the
database not accepting connections yet at startup, or the password hasher
backend failing under load.
"""

from collections.abc import Awaitable, Callable
from logging import getLogger

from sqlalchemy.exc import OperationalError
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bloglist.configs import file_logger

logger = file_logger(getLogger(__name__))

# Connection level failures worth another attempt
TRANSIENT_DB_ERRORS = (OperationalError, ConnectionError, TimeoutError, OSError)

type AsyncFn[**P, T] = Callable[P, Awaitable[T]]


def _describe_retry(max_retries: int) -> Callable[[RetryCallState], None]:
    def before_sleep(retry_state: RetryCallState) -> None:
        exception = retry_state.outcome.exception() if retry_state.outcome else None
        wait = retry_state.next_action.sleep if retry_state.next_action else 0
        name = retry_state.fn.__qualname__ if retry_state.fn else "unknown"
        logger.warning(
            f"{name} failed with {type(exception).__name__} "
            f"(attempt {retry_state.attempt_number}/{max_retries}), retrying in {wait:.2f}s: {exception}",
        )

    return before_sleep


def with_retry[**P, T](
    max_retries: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
    exec_retry: type[Exception] | tuple[type[Exception], ...] = TRANSIENT_DB_ERRORS,
) -> Callable[[AsyncFn[P, T]], AsyncFn[P, T]]:
    """
    Retry an async function with exponential backoff using Tenacity.

    The last exception is re-raised unchanged once retries are exhausted,
    so callers see the same error they would without the decorator.

    Args:
        max_retries: Maximum number of attempts.
        base_delay: Initial delay between retries in seconds.
        max_delay: Maximum delay between retries in seconds.
        exec_retry: Exception type(s) to retry on.

    Returns:
        Decorated function with retry logic.
    """
    return retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(exec_retry),
        before_sleep=_describe_retry(max_retries),
        reraise=True,
    )
