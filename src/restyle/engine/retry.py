"""Backoff and retry for tag backends that fail transiently."""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """How often and how patiently a failing tag backend is asked again.

    *on_retry* is called with (attempt, error, delay) before each pause.
    """

    max_retries: int = 2
    base_delay: float = 0.5
    max_delay: float = 10.0
    backoff_multiplier: float = 2.0
    jitter: bool = True
    on_retry: Callable[[int, Exception, float], None] | None = field(
        default=None, compare=False, hash=False
    )


NO_RETRY = RetryPolicy(max_retries=0)


def calculate_delay(attempt: int, policy: RetryPolicy) -> float:
    """Backoff before asking the tag backend again after *attempt* failures.

    ``attempt`` counts from 0 for the first retry. The delay grows by
    ``backoff_multiplier`` per attempt, never exceeds ``max_delay``, and is
    spread by +/-50% when jitter is on.
    """
    delay = policy.base_delay * policy.backoff_multiplier ** attempt
    delay = min(delay, policy.max_delay)
    if not policy.jitter:
        return delay
    return delay * random.uniform(0.5, 1.5)


def _retry_delay(exc: Exception, attempt: int, policy: RetryPolicy) -> float | None:
    """Seconds to wait before the next proposal request, or None to give up."""
    if attempt >= policy.max_retries or not getattr(exc, "retryable", True):
        return None
    retry_after: float | None = getattr(exc, "retry_after", None)
    if retry_after is None:
        return calculate_delay(attempt, policy)
    # A backend asking for a longer pause than we allow is treated as down.
    return retry_after if retry_after <= policy.max_delay else None


def with_retry(fn: Callable[[], T], policy: RetryPolicy) -> T:
    """Request tag proposals through *fn*, retrying transient backend errors.

    A backend error marks itself final with ``retryable=False``; anything
    without the attribute (timeouts, dropped connections) is retried. The
    last error propagates once retries run out so the engine can degrade to
    static classification.
    """
    attempt = 0
    while True:
        try:
            return fn()
        except Exception as exc:
            delay = _retry_delay(exc, attempt, policy)
            if delay is None:
                raise
            if policy.on_retry is not None:
                policy.on_retry(attempt, exc, delay)
            time.sleep(delay)
            attempt += 1
