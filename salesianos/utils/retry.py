"""Standardized retry logic for page fetches.

Provides a centralized way to create retry configurations using tenacity.
"""

from collections.abc import Callable
from typing import Any

from tenacity import (
    BaseRetrying,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)


def get_retryer(
    max_retries: int = 3,
    delay: float = 2.0,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
    log_callback: Callable[[Any], None] | None = None,
    reraise: bool = True,
) -> BaseRetrying:
    """Create a standardized tenacity Retrying object.

    The first attempt is not counted as a retry, so at most
    ``max_retries + 1`` attempts are made, separated by a fixed delay.

    Args:
        max_retries: Number of retries after the first failed attempt.
        delay: Fixed wait between attempts in seconds.
        exceptions: Tuple of exception types to retry on.
        log_callback: Optional callback function for before_sleep logging.
                      Receives the retry state.
        reraise: Whether to reraise the exception after all retries fail.

    Returns:
        A configured tenacity.Retrying object.

    """
    return Retrying(
        stop=stop_after_attempt(max_retries + 1),
        wait=wait_fixed(delay),
        retry=retry_if_exception_type(exceptions),
        before_sleep=log_callback,
        reraise=reraise,
    )
