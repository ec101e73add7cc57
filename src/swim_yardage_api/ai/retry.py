"""Retry utilities for LLM provider calls with exponential backoff."""
import logging
from typing import Any, Callable, TypeVar

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY_SECONDS = 1.0
DEFAULT_MAX_WAIT_SECONDS = 10.0

_UNAVAILABLE_MARKERS = (
    "503",
    "529",
    "429",
    "unavailable",
    "overloaded",
)

_NETWORK_MARKERS = (
    "timeout",
    "timed out",
    "connection",
    "name or service not known",
    "nodename nor servname provided",
    "getaddrinfo failed",
    "temporary failure in name resolution",
)


def is_retryable_error(exception: BaseException) -> bool:
    """
    Determine if an exception is worth another attempt.

    Retryable:
    - "Temporarily unavailable" statuses (503, Anthropic's 529 overloaded,
      429 rate limited)
    - Transient network failures (timeouts, connection errors, DNS)

    Everything else, including authentication and bad request errors and
    malformed provider output, fails on the first attempt.
    """
    if isinstance(exception, httpx.HTTPStatusError):
        return exception.response.status_code in (429, 503, 529)
    if isinstance(exception, (httpx.TimeoutException, httpx.NetworkError)):
        return True

    error_str = str(exception).lower()
    exception_type = type(exception).__name__.lower()

    if "timeout" in exception_type or "connect" in exception_type:
        return True

    if any(code in error_str for code in ["400", "401", "403", "404"]):
        return False
    if "authentication" in error_str or "unauthorized" in error_str:
        return False
    if "quota" in error_str and "exceeded" in error_str:
        return False

    if "rate" in error_str and "limit" in error_str:
        return True
    if any(marker in error_str for marker in _UNAVAILABLE_MARKERS):
        return True
    if any(marker in error_str for marker in _NETWORK_MARKERS):
        return True

    # Default: don't retry unknown errors
    return False


def create_retrying(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    base_delay_seconds: float = DEFAULT_BASE_DELAY_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
) -> Retrying:
    """
    Build a tenacity controller: base delay doubled per attempt, capped.

    The last attempt's exception is re-raised unchanged.
    """
    return Retrying(
        retry=retry_if_exception(is_retryable_error),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=base_delay_seconds, max=max_wait_seconds),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def retry_sync_call(
    func: Callable[..., T],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    base_delay_seconds: float = DEFAULT_BASE_DELAY_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
    **kwargs: Any,
) -> T:
    """
    Execute a sync function with retry logic.

    Args:
        func: Sync function to execute
        *args: Positional arguments for the function
        max_attempts: Maximum number of attempts, including the first
        base_delay_seconds: Wait before the second attempt; doubles after
        max_wait_seconds: Upper bound for a single wait
        **kwargs: Keyword arguments for the function

    Returns:
        Result of the function call

    Raises:
        Exception: The final attempt's exception
    """
    retrying = create_retrying(
        max_attempts=max_attempts,
        base_delay_seconds=base_delay_seconds,
        max_wait_seconds=max_wait_seconds,
    )
    try:
        return retrying(func, *args, **kwargs)
    except Exception as e:
        if is_retryable_error(e):
            logger.error(f"All {max_attempts} attempts failed. Last error: {e}")
        else:
            logger.warning(f"Non-retryable error encountered: {e}")
        raise
