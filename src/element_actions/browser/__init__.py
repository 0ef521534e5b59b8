"""Host environments that element actions run against."""

from element_actions.browser.host import (
    EVENT_TYPES,
    ElementHandle,
    EventSource,
    Host,
    InteractionEvent,
)
from element_actions.browser.memory import MemoryElement, MemoryHost
from element_actions.browser.playwright_host import PlaywrightElement, PlaywrightHost, open_page

__all__ = [
    # Contracts
    "Host",
    "ElementHandle",
    "EventSource",
    "InteractionEvent",
    "EVENT_TYPES",
    # In-memory host
    "MemoryHost",
    "MemoryElement",
    # Playwright host
    "PlaywrightHost",
    "PlaywrightElement",
    "open_page",
]
