"""
Async waiting primitives for asserting eventual consistency.

The order and payment services only agree eventually: a payment appears some
time after the order event has been consumed. Tests therefore either retry a
fallible lookup (retry_with_backoff) or poll a boolean condition against a
wall-clock bound (wait_for). Both suspend only through ``sleep``; attempts
within one call never overlap, and independent calls can be fanned out with
``asyncio.gather``.

All durations are in milliseconds.
"""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, TypeVar

from orderflow_test_libs.error_handling import ConditionTimeoutError
from orderflow_test_libs.logging_utils import create_harness_logger

logger = create_harness_logger("orderflow.async_utils")

T = TypeVar("T")

Operation = Callable[[], Awaitable[T]]
Predicate = Callable[[], Awaitable[bool]]


async def sleep(ms: float) -> None:
    """Suspend the current task for ``ms`` milliseconds without blocking the loop."""
    await asyncio.sleep(ms / 1000)


def _now_ms() -> float:
    return time.monotonic() * 1000


async def retry_with_backoff(
    operation: Operation[T],
    max_retries: int = 5,
    initial_delay_ms: float = 1000,
) -> T:
    """
    Invoke ``operation`` until it succeeds or the attempt budget is spent.

    The first attempt runs immediately. After failed attempt ``i`` (zero-based)
    the next one starts ``initial_delay_ms * 2**i`` later.

    Args:
        operation: Zero-argument coroutine function to invoke
        max_retries: Total number of attempts, at least 1
        initial_delay_ms: Delay before the second attempt

    Returns:
        The result of the first successful attempt

    Raises:
        The exception of the last attempt when every attempt failed; earlier
        errors are discarded.
        ValueError: If the budget or delay is out of range
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be >= 1, got {max_retries}")
    if initial_delay_ms < 0:
        raise ValueError(f"initial_delay_ms must be >= 0, got {initial_delay_ms}")

    attempt = 0
    while True:
        try:
            return await operation()
        except Exception as e:
            attempt += 1
            if attempt >= max_retries:
                logger.warning(
                    f"Operation failed after {attempt} attempts",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

            delay = initial_delay_ms * (2 ** (attempt - 1))
            logger.info(
                f"Retry {attempt}/{max_retries} after {delay}ms",
                error=str(e),
                error_type=type(e).__name__,
            )
            await sleep(delay)


async def wait_for(
    condition: Predicate,
    timeout_ms: float = 30000,
    check_interval_ms: float = 1000,
    description: str | None = None,
) -> None:
    """
    Wait until ``condition`` returns True, bounded by wall-clock time.

    Elapsed time is checked before every evaluation, so at least one check
    always happens. A condition that raises is not retried: its exception
    propagates as-is.

    Args:
        condition: Zero-argument coroutine function returning a bool
        timeout_ms: Wall-clock bound for the whole wait
        check_interval_ms: Pause between a False result and the next check
        description: Optional label for log output

    Raises:
        ConditionTimeoutError: If elapsed time exceeds ``timeout_ms`` before the
            condition returned True
        ValueError: If the timeout or interval is negative
    """
    if timeout_ms < 0:
        raise ValueError(f"timeout_ms must be >= 0, got {timeout_ms}")
    if check_interval_ms < 0:
        raise ValueError(f"check_interval_ms must be >= 0, got {check_interval_ms}")

    label = description or getattr(condition, "__name__", "condition")
    start = _now_ms()
    checks = 0

    while True:
        elapsed = _now_ms() - start
        if elapsed > timeout_ms:
            logger.warning(
                f"Timed out waiting for {label}",
                timeout_ms=timeout_ms,
                elapsed_ms=round(elapsed),
                checks=checks,
            )
            raise ConditionTimeoutError(timeout_ms, elapsed, checks)

        checks += 1
        if await condition():
            logger.debug(f"{label} satisfied", checks=checks, elapsed_ms=round(elapsed))
            return

        await sleep(check_interval_ms)
