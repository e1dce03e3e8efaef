"""Retry logic for remote store round trips with exponential backoff.

The Realtime Database REST endpoint occasionally drops connections or answers
with a transient 5xx. Store adapters wrap their HTTP calls with the decorator
below so that a single blip does not surface to the caller as a failure.
"""

import logging
import time
from functools import wraps
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def retry_with_backoff(
    max_retries: int = 3,
    initial_delay: float = 0.5,
    backoff_factor: float = 2.0,
    exceptions: tuple[type[Exception], ...] = (ConnectionError, TimeoutError),
) -> Callable[[F], F]:
    """Decorator to retry a store call with exponential backoff.

    The call always runs at least once. While it raises one of
    ``exceptions`` it is retried up to ``max_retries`` more times; a negative
    value counts as zero. Any other exception propagates immediately, and
    the final failure is re-raised unchanged.

    Args:
        max_retries: Number of retries after the first attempt (default: 3)
        initial_delay: Delay in seconds before the first retry (default: 0.5)
        backoff_factor: Multiplier applied to the delay after each retry
        exceptions: Exception types that trigger a retry

    Example:
        @retry_with_backoff(max_retries=2, initial_delay=0.5)
        def read_state():
            response = session.get(url, timeout=10)
            response.raise_for_status()
            return response.json()

    With the defaults a failing call is attempted four times, waiting
    0.5s, 1s and 2s between attempts.
    """
    total_attempts = max(max_retries, 0) + 1

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            attempt = 1
            delay = initial_delay

            while True:
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    context = {
                        "function": func.__name__,
                        "attempt": attempt,
                        "total_attempts": total_attempts,
                        "exception_type": type(e).__name__,
                    }
                    if attempt >= total_attempts:
                        logger.error(
                            "Store call %s gave up after %d attempts: %s",
                            func.__name__, total_attempts, e,
                            extra=context,
                        )
                        raise

                    logger.warning(
                        "Store call %s failed (attempt %d/%d), retrying in %.1fs: %s",
                        func.__name__, attempt, total_attempts, delay, e,
                        extra={**context, "delay_seconds": delay},
                    )

                time.sleep(delay)
                delay *= backoff_factor
                attempt += 1

        return wrapper  # type: ignore

    return decorator
