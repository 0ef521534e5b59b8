"""Host environment contracts.

A host resolves a locator to at most one element and exposes the four
primitive operations on it. Hosts that can report live user interactions
also implement :class:`EventSource`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable


class ElementHandle(Protocol):
    """An addressable element. Any method may raise a fault."""

    async def click(self) -> None: ...

    async def set_value(self, value: str) -> None: ...

    async def focus(self) -> None: ...

    async def text_content(self) -> str: ...


class Host(Protocol):
    """Resolves locators to element handles."""

    async def resolve(self, locator: str) -> ElementHandle | None:
        """Return the first element matching locator, or None."""
        ...


# Interaction event types a recorder listens to
CLICK = "click"
INPUT = "input"
FOCUS = "focus"
EVENT_TYPES = (CLICK, INPUT, FOCUS)


@dataclass(frozen=True)
class InteractionEvent:
    """A user interaction observed on a host.

    Attributes:
        event_type: One of "click", "input", "focus"
        target: Element the event fired on; exposes ``element_id`` and ``value``
    """

    event_type: str
    target: Any


EventHandler = Callable[[InteractionEvent], None]


@runtime_checkable
class EventSource(Protocol):
    """Something a recorder can subscribe to."""

    def add_listener(self, event_type: str, handler: EventHandler) -> None: ...

    def remove_listener(self, event_type: str, handler: EventHandler) -> None: ...
