"""Generic async retry with exponential backoff and jitter."""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from typing import TypeVar

from config import RetryPolicy
from services.errors import EnrichmentUnavailable, TransientProviderError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_transient(exc: BaseException) -> bool:
    return isinstance(exc, (TransientProviderError, asyncio.TimeoutError, ConnectionError))


def backoff_delay(attempt: int, policy: RetryPolicy, rng: random.Random | None = None) -> float:
    """Delay before retry number `attempt` (1-based), jitter included."""
    delay = min(policy.max_delay, policy.base_delay * policy.multiplier ** (attempt - 1))
    if policy.jitter:
        delay += (rng or random).uniform(0, delay * policy.jitter)
    return delay


async def retry_async(
    func: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    is_retryable: Callable[[BaseException], bool] = is_transient,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    rng: random.Random | None = None,
    label: str = "call",
) -> T:
    """Await func(), retrying retryable failures up to policy.max_attempts.

    Non-retryable exceptions propagate on the first occurrence. When the
    attempts run out the last error is wrapped in EnrichmentUnavailable.
    """
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await func()
        except Exception as e:
            if not is_retryable(e):
                raise
            if attempt == policy.max_attempts:
                logger.error("%s failed after %d attempts: %s", label, attempt, e)
                raise EnrichmentUnavailable(f"{label} failed after {attempt} attempts") from e
            delay = backoff_delay(attempt, policy, rng)
            logger.warning(
                "%s failed (attempt %d/%d): %s - retrying in %.2fs",
                label, attempt, policy.max_attempts, e, delay,
            )
            await sleep(delay)
    raise RuntimeError("retry loop exhausted")  # pragma: no cover
