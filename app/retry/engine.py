"""Bounded exponential-backoff retry execution with jitter."""

from __future__ import annotations

import asyncio
import logging
import random
import time
from typing import Awaitable, Callable, Final, TypeVar

from .interfaces import RetryOptions, RetryOutcome

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")

JITTER_RATIO: Final[float] = 0.25


def retry_calculate_delay_ms(attempt_number: int, options: RetryOptions, random_unit: float = 0.5) -> float:
    """Calculate the backoff delay that precedes one attempt.

    Delay before attempt `n` (n >= 2) is `min(base * multiplier^(n-2), max)`.
    With jitter enabled the capped delay is shifted by a uniform +/-25% and
    clamped at zero.

    Args:
        attempt_number: One-based number of the attempt about to start.
        options: Retry configuration.
        random_unit: Random value in [0.0, 1.0] used for jitter.

    Returns:
        float: Delay in milliseconds.

    Raises:
        ValueError: Raised when attempt_number < 2 or random_unit is out of range.
    """

    if attempt_number < 2:
        raise ValueError("attempt_number must be >= 2; the first attempt is never delayed")
    if random_unit < 0.0 or random_unit > 1.0:
        raise ValueError("random_unit must be in [0.0, 1.0]")

    exponential_delay_ms = options.base_delay_ms * (options.backoff_multiplier ** (attempt_number - 2))
    capped_delay_ms = min(exponential_delay_ms, options.max_delay_ms)
    if not options.jitter:
        return float(capped_delay_ms)

    jitter_range_ms = capped_delay_ms * JITTER_RATIO
    jitter_ms = (random_unit - 0.5) * 2 * jitter_range_ms
    return max(0.0, float(capped_delay_ms + jitter_ms))


async def retry_execute(
    operation: Callable[[], Awaitable[ResultT]],
    options: RetryOptions | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    random_unit_interval_provider: Callable[[], float] = random.random,
    clock: Callable[[], float] = time.monotonic,
) -> RetryOutcome[ResultT]:
    """Execute an idempotent async operation with bounded retries.

    Attempts run strictly one after another. The operation is invoked at
    most `max_attempts` times, no delay follows the final attempt and a
    rejected `retry_condition` stops immediately.

    Args:
        operation: Zero-argument coroutine factory for one attempt.
        options: Retry configuration; defaults to `RetryOptions()`.
        sleep: Awaitable sleep taking seconds.
        random_unit_interval_provider: Provider returning values in [0.0, 1.0].
        clock: Monotonic clock in seconds.

    Returns:
        RetryOutcome: Success value or last error with attempt accounting.

    Raises:
        asyncio.CancelledError: Propagated when the caller cancels the retry loop.
    """

    resolved_options = options or RetryOptions()
    started_at = clock()
    last_error: BaseException | None = None

    for attempt_number in range(1, resolved_options.max_attempts + 1):
        try:
            value = await operation()
        except asyncio.CancelledError:
            raise
        except Exception as error:  # pylint: disable=broad-exception-caught
            last_error = error
        else:
            return RetryOutcome(
                success=True,
                value=value,
                attempts=attempt_number,
                total_duration_ms=_retry_elapsed_ms(started_at, clock),
            )

        if not resolved_options.retry_condition(last_error):
            return RetryOutcome(
                success=False,
                error=last_error,
                attempts=attempt_number,
                total_duration_ms=_retry_elapsed_ms(started_at, clock),
            )

        if attempt_number < resolved_options.max_attempts:
            delay_ms = retry_calculate_delay_ms(
                attempt_number=attempt_number + 1,
                options=resolved_options,
                random_unit=float(random_unit_interval_provider()),
            )
            logger.warning(
                "Retry attempt %s failed (%s), waiting %.0fms before attempt %s",
                attempt_number,
                last_error,
                delay_ms,
                attempt_number + 1,
            )
            await sleep(delay_ms / 1000.0)

    return RetryOutcome(
        success=False,
        error=last_error,
        attempts=resolved_options.max_attempts,
        total_duration_ms=_retry_elapsed_ms(started_at, clock),
    )


def _retry_elapsed_ms(started_at: float, clock: Callable[[], float]) -> float:
    return max(0.0, (clock() - started_at) * 1000.0)
