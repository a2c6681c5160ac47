"""Bounded interval polling for long-running swap steps.

Used where a step has to wait on an external confirmation without
stalling the caller's scheduler: the wait is capped at a fixed number of
attempts and sleeps with ``asyncio.sleep`` so cancellation propagates
immediately.
"""

import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


async def with_interval(
    func: Callable[[], Awaitable[Optional[Any]]],
    min_interval: float = 15.0,
    max_interval: float = 30.0,
    max_attempts: int = 4,
    operation: str = "poll",
) -> Optional[Any]:
    """Call ``func`` until it returns a truthy result or attempts run out.

    The first attempt runs immediately; later attempts wait a random
    interval between ``min_interval`` and ``max_interval`` seconds so many
    swaps polling at once don't line up.

    Args:
        func: Coroutine function returning a result or None
        min_interval: Lower bound of the wait between attempts (seconds)
        max_interval: Upper bound of the wait between attempts (seconds)
        max_attempts: Maximum number of calls to ``func``
        operation: Description for logging

    Returns:
        The first truthy result, or None if every attempt came back empty
    """
    for attempt in range(1, max_attempts + 1):
        result = await func()
        if result:
            logger.debug(f"{operation}: got result on attempt {attempt}")
            return result

        if attempt < max_attempts:
            delay = random.uniform(min_interval, max_interval)
            logger.debug(f"{operation}: attempt {attempt}/{max_attempts} empty, retrying in {delay:.1f}s")
            await asyncio.sleep(delay)

    logger.info(f"{operation}: no result after {max_attempts} attempts")
    return None
