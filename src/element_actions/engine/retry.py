"""Retry and timing policy for a single action."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from element_actions.engine.executor import notify
from element_actions.models.descriptor import FaultObserver
from element_actions.models.results import Fault

logger = logging.getLogger(__name__)

AttemptThunk = Callable[[int], Awaitable[bool]]
Sleeper = Callable[[float], Awaitable[None]]


async def run_with_policy(
    thunk: AttemptThunk,
    max_retries: int = 0,
    on_attempt_error: FaultObserver | None = None,
    delay_before_ms: int = 0,
    sleep: Sleeper = asyncio.sleep,
    label: str = "",
    locator: str = "",
    kind: str = "",
) -> bool:
    """Run an attempt function up to ``max_retries + 1`` times. Never raises.

    The pre-delay is slept once before the first attempt. There is no delay
    between attempts and no backoff.

    Args:
        thunk: Called with the 0-based attempt index; returns success
        max_retries: Additional attempts after the first
        on_attempt_error: Observer for attempts where thunk itself raised
        delay_before_ms: Milliseconds to wait before the first attempt
        sleep: Awaitable sleep, replaceable in tests
        label: Name used in log messages
        locator: Locator reported in faults from a raising thunk
        kind: Operation kind reported in those faults

    Returns:
        True on the first successful attempt, False once all are exhausted
    """
    if delay_before_ms > 0:
        await sleep(delay_before_ms / 1000)

    for attempt in range(max_retries + 1):
        try:
            if await thunk(attempt):
                if attempt:
                    logger.info(f"{label} succeeded on attempt {attempt + 1}")
                return True
        except Exception as e:
            logger.warning(f"{label} attempt {attempt + 1} raised: {e}")
            fault = Fault.from_exception(e, locator=locator, kind=kind, attempt=attempt)
            notify(on_attempt_error, fault)

    logger.debug(f"{label} failed after {max_retries + 1} attempt(s)")
    return False
