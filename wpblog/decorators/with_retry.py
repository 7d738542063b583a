from asyncio import sleep as asyncio_sleep
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import ParamSpec, TypeVar

from httpx import HTTPError
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from wpblog.configs import file_logger
from wpblog.errors import WordPressError

logger = file_logger(getLogger(__name__))

# Type variables for retry decorator
P = ParamSpec("P")
T = TypeVar("T")
# Retriable exception types
RETRIABLE_EXCEPTIONS = (WordPressError, HTTPError, ConnectionError, TimeoutError, ValueError)


def _log_before_sleep(
    max_retries: int,
) -> Callable[[RetryCallState], None]:
    """
    Create a before_sleep callback that logs retry attempts.

    Args:
        max_retries: Maximum number of attempts for log message.

    Returns:
        Callback function for tenacity before_sleep.
    """

    def before_sleep_callback(retry_state: RetryCallState) -> None:
        """Log retry information before sleeping."""
        exception = retry_state.outcome.exception() if retry_state.outcome else None
        # next_action contains the sleep duration
        sleep_duration = retry_state.next_action.sleep if retry_state.next_action else 0
        func_name = retry_state.fn.__name__ if retry_state.fn else "unknown"

        logger.warning(
            "Attempt %d/%d for %s failed: %s. Retrying in %.2fs",
            retry_state.attempt_number,
            max_retries,
            func_name,
            exception,
            sleep_duration,
        )

    return before_sleep_callback


def with_retry(
    max_retries: int = 3,
    delay: float = 2.0,
    exec_retry: tuple[type[Exception], ...] = RETRIABLE_EXCEPTIONS,
    sleep: Callable[[float], Awaitable[None]] = asyncio_sleep,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Apply retry logic with linear backoff to async functions using Tenacity.

    The wait before attempt ``n + 1`` is ``n * delay`` seconds.

    Args:
        max_retries: Maximum number of attempts, including the first one.
        delay: Backoff step in seconds.
        exec_retry: Tuple of exception types to retry on.
        sleep: Awaitable sleep used between attempts.

    Returns:
        Decorated function with retry logic.
    """
    return retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_incrementing(start=delay, increment=delay),
        retry=retry_if_exception_type(exec_retry),
        before_sleep=_log_before_sleep(max_retries),
        sleep=sleep,
        reraise=True,
    )
