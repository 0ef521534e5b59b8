"""Single-action executor: the fault-containment boundary."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from element_actions.engine.primitives import perform
from element_actions.models.results import Fault

if TYPE_CHECKING:
    from element_actions.browser.host import Host
    from element_actions.engine.factory import ElementAction
    from element_actions.models.descriptor import FaultObserver

logger = logging.getLogger(__name__)


def notify(observer: FaultObserver | None, fault: Fault) -> None:
    """Hand a fault to an observer. Errors raised by the observer are logged."""
    if observer is None:
        return
    try:
        observer(fault)
    except Exception:
        logger.exception(f"Fault observer failed for {fault.locator}")


async def execute(
    host: Host,
    locator: str,
    action: ElementAction,
    on_fault: FaultObserver | None = None,
    attempt: int = 0,
    redact_values: bool = True,
) -> bool:
    """Resolve ``locator`` and apply ``action`` exactly once. Never raises.

    Args:
        host: Host environment
        locator: Element locator
        action: Action built by :func:`build_action`
        on_fault: Observer receiving a Fault when the primitive raises
        attempt: 0-based attempt index recorded on the Fault
        redact_values: Mask SET_VALUE values in log output

    Returns:
        True if the element was found and the action completed
    """
    logger.debug(f"Attempt {attempt + 1}: {action.describe(redact_values)} on {locator}")
    try:
        result = await perform(host, locator, action, attempt)
    except Exception as e:
        # perform() captures primitive faults; this catches a broken host/action
        result = None
        fault = Fault.from_exception(e, locator=locator, kind=action.kind.value, attempt=attempt)
    else:
        fault = result.fault

    if result is not None and result.not_found:
        logger.debug(f"Element not found: {locator}")
        return False

    if fault is not None:
        logger.warning(f"Error performing {action.kind.value} on {locator}: {fault.error_type}: {fault.message}")
        notify(on_fault, fault)
        return False

    return True
