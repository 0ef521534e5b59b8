"""Locator resolution and primitive application.

No policy lives here: one resolution, one application, and the outcome as
an :class:`ActionResult`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from element_actions.models.descriptor import OperationKind
from element_actions.models.results import ActionResult, Fault

if TYPE_CHECKING:
    from element_actions.browser.host import ElementHandle, Host
    from element_actions.engine.factory import ElementAction

logger = logging.getLogger(__name__)


async def resolve(host: Host, locator: str) -> ElementHandle | None:
    """Resolve a locator, treating a host error as not found."""
    try:
        return await host.resolve(locator)
    except Exception as e:
        logger.warning(f"Host failed to resolve {locator!r}: {e}")
        return None


async def apply(handle: ElementHandle, action: ElementAction, locator: str = "") -> str | None:
    """Apply an action to a resolved element. May raise.

    READ_TEXT surfaces the text through the log and returns it.
    """
    result = await action(handle)
    if action.kind is OperationKind.READ_TEXT:
        logger.info(f"Text of {locator}: {result!r}")
        return result
    return None


async def perform(
    host: Host,
    locator: str,
    action: ElementAction,
    attempt: int = 0,
) -> ActionResult:
    """Resolve ``locator`` and apply ``action``, capturing any fault."""
    handle = await resolve(host, locator)
    if handle is None:
        return ActionResult(found=False)
    try:
        text = await apply(handle, action, locator)
    except Exception as e:
        return ActionResult(
            found=True,
            fault=Fault.from_exception(e, locator=locator, kind=action.kind.value, attempt=attempt),
        )
    return ActionResult(found=True, text=text)
