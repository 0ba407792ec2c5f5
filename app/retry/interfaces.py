"""Typed contracts for the retry engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

ResultT = TypeVar("ResultT")


def retry_always(_error: BaseException) -> bool:
    """Retry condition that accepts every error.

    Args:
        _error: Error raised by the failed attempt.

    Returns:
        bool: Always True.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return True


@dataclass(frozen=True)
class RetryOptions:
    """Immutable retry configuration for one retried operation.

    Attributes:
        max_attempts: Total attempts including the first one.
        base_delay_ms: Delay before the second attempt.
        max_delay_ms: Exponential delay cap applied before jitter.
        backoff_multiplier: Growth factor between consecutive delays.
        jitter: Whether to shift each delay by a uniform +/-25%.
        retry_condition: Predicate deciding whether a failed attempt is retried.
    """

    max_attempts: int = 3
    base_delay_ms: float = 1000.0
    max_delay_ms: float = 10000.0
    backoff_multiplier: float = 2.0
    jitter: bool = True
    retry_condition: Callable[[BaseException], bool] = retry_always

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.base_delay_ms < 0:
            raise ValueError("base_delay_ms must be >= 0")
        if self.max_delay_ms < 0:
            raise ValueError("max_delay_ms must be >= 0")
        if self.backoff_multiplier < 1:
            raise ValueError("backoff_multiplier must be >= 1")


@dataclass(frozen=True)
class RetryOutcome(Generic[ResultT]):
    """Result contract for one retried operation.

    Attributes:
        success: Whether any attempt completed without error.
        value: Operation return value when successful.
        error: Last observed error when unsuccessful.
        attempts: Number of attempts actually executed.
        total_duration_ms: Wall-clock duration including backoff sleeps.
    """

    success: bool
    attempts: int
    total_duration_ms: float
    value: ResultT | None = None
    error: BaseException | None = None
