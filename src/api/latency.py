"""Optional simulated latency for interactive clients."""

import asyncio
import functools
import logging
import random

from config import get_settings

logger = logging.getLogger(__name__)


async def sleep_random(min_ms: int, max_ms: int) -> float:
    """
    Sleep for a random duration in [min_ms, max_ms].

    Returns the delay in seconds; 0 when the range is disabled. The sleep is
    cancellable like any other await.
    """
    if max_ms <= 0:
        return 0.0
    delay = random.uniform(min_ms, max_ms) / 1000
    await asyncio.sleep(delay)
    return delay


def simulated_latency(func):
    """
    Delay an async endpoint's response by the configured latency range.

    The endpoint's computed result is unchanged. Uses the endpoint's
    `settings` argument when it has one, so dependency overrides apply.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        result = await func(*args, **kwargs)
        settings = kwargs.get("settings") or get_settings()
        delay = await sleep_random(settings.latency_min_ms, settings.latency_max_ms)
        if delay:
            logger.debug(f"Simulated {delay * 1000:.0f}ms latency for {func.__name__}")
        return result

    return wrapper
