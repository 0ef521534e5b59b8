"""Batch runner: concurrent dispatch with order-preserving results."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from element_actions.core.config import Config
from element_actions.core.exceptions import UnsupportedOperationError
from element_actions.engine.executor import execute
from element_actions.engine.factory import ElementAction, build_action
from element_actions.engine.retry import Sleeper, run_with_policy
from element_actions.models.descriptor import ActionDescriptor

if TYPE_CHECKING:
    from element_actions.browser.host import Host

logger = logging.getLogger(__name__)


def build_actions(descriptors: Sequence[ActionDescriptor]) -> list[ElementAction]:
    """Build every action, failing on the first unknown kind.

    Raises:
        UnsupportedOperationError: With the offending index in ``details``
    """
    actions = []
    for index, descriptor in enumerate(descriptors):
        try:
            actions.append(build_action(descriptor.kind, descriptor.value))
        except UnsupportedOperationError as e:
            e.details.update({"index": index, "locator": descriptor.locator})
            raise
    return actions


async def _run_built(
    host: Host,
    descriptor: ActionDescriptor,
    action: ElementAction,
    sleep: Sleeper,
    redact_values: bool,
) -> bool:
    async def attempt(index: int) -> bool:
        return await execute(
            host,
            descriptor.locator,
            action,
            on_fault=descriptor.on_attempt_error,
            attempt=index,
            redact_values=redact_values,
        )

    logger.debug(f"Dispatching {descriptor} with up to {descriptor.total_attempts} attempt(s)")
    return await run_with_policy(
        attempt,
        max_retries=descriptor.max_retries,
        on_attempt_error=descriptor.on_attempt_error,
        delay_before_ms=descriptor.delay_before_ms,
        sleep=sleep,
        label=str(descriptor),
        locator=descriptor.locator,
        kind=descriptor.kind_name,
    )


async def run_descriptor(
    host: Host,
    descriptor: ActionDescriptor,
    sleep: Sleeper = asyncio.sleep,
    redact_values: bool = True,
) -> bool:
    """Execute one descriptor with its delay and retry policy.

    Raises:
        UnsupportedOperationError: If the descriptor's kind is unknown
    """
    action = build_action(descriptor.kind, descriptor.value)
    return await _run_built(host, descriptor, action, sleep, redact_values)


async def _run_slot(
    host: Host,
    index: int,
    descriptor: ActionDescriptor,
    sleep: Sleeper,
    redact_values: bool,
) -> bool:
    try:
        action = build_action(descriptor.kind, descriptor.value)
    except UnsupportedOperationError as e:
        logger.error(f"Skipping action {index} on {descriptor.locator or '<no locator>'}: {e.message}")
        return False
    return await _run_built(host, descriptor, action, sleep, redact_values)


async def run_all(
    host: Host,
    descriptors: Iterable[ActionDescriptor],
    sleep: Sleeper = asyncio.sleep,
    redact_values: bool = True,
) -> list[bool]:
    """Execute all descriptors concurrently. Never raises as a whole.

    Results are index-aligned with the input regardless of completion order.
    There is no cancellation and no isolation between descriptors that
    target the same element. A descriptor with an unknown kind is logged,
    never reaches the host and gets ``False`` in its slot.

    Args:
        host: Host environment
        descriptors: Descriptors in the order results should be returned
        sleep: Awaitable sleep used for pre-delays
        redact_values: Mask SET_VALUE values in log output

    Returns:
        One boolean per descriptor
    """
    descriptors = list(descriptors)

    outcomes = await asyncio.gather(
        *(
            _run_slot(host, index, descriptor, sleep, redact_values)
            for index, descriptor in enumerate(descriptors)
        ),
        return_exceptions=True,
    )

    results = []
    for descriptor, outcome in zip(descriptors, outcomes):
        if isinstance(outcome, BaseException):
            logger.error(f"{descriptor} aborted: {outcome!r}")
            results.append(False)
        else:
            results.append(outcome)
    return results


def run_all_sync(
    host: Host,
    descriptors: Iterable[ActionDescriptor],
    redact_values: bool = True,
) -> list[bool]:
    """Blocking wrapper around :func:`run_all` for callers without a loop."""
    return asyncio.run(run_all(host, descriptors, redact_values=redact_values))


class ActionRunner:
    """Runs descriptor batches against one host.

    Example:
        >>> runner = ActionRunner(MemoryHost.from_file("page.json"))
        >>> results = runner.run_sync(load_descriptors("actions.json"))
        >>> print(results)
        [True, False, True]
    """

    def __init__(
        self,
        host: Host,
        config: Config | None = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        """Initialize the runner.

        Args:
            host: Host environment to run against
            config: Optional configuration
            sleep: Awaitable sleep used for pre-delays
        """
        self.host = host
        self.config = config or Config.from_env()
        self._sleep = sleep

    async def run(self, descriptors: Iterable[ActionDescriptor]) -> list[bool]:
        descriptors = list(descriptors)
        logger.info(f"Running {len(descriptors)} action(s)")
        results = await run_all(
            self.host,
            descriptors,
            sleep=self._sleep,
            redact_values=self.config.redact_values,
        )
        logger.info(f"Batch finished: {sum(results)}/{len(results)} actions succeeded")
        return results

    def run_sync(self, descriptors: Iterable[ActionDescriptor]) -> list[bool]:
        return asyncio.run(self.run(descriptors))
