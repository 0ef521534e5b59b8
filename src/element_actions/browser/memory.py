"""In-memory element tree host.

Used for dry runs from a JSON fixture and as the host in tests. Behaves like
a small DOM: programmatic ``click()``/``focus()`` fire listeners, assigning a
value does not, and ``type_text()`` simulates a user typing (fires ``input``).
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from element_actions.browser.host import (
    CLICK,
    FOCUS,
    INPUT,
    EventHandler,
    InteractionEvent,
)
from element_actions.core.exceptions import ElementDetachedError, ElementFault

logger = logging.getLogger(__name__)

_LOCATOR_RE = re.compile(
    r"^(?P<tag>[A-Za-z][\w-]*)?(?:#(?P<id>[\w-]+)|\.(?P<cls>[\w-]+))?$"
)


@dataclass
class MemoryElement:
    """An element in a :class:`MemoryHost`.

    Attributes:
        element_id: id attribute ("" when absent)
        tag: Tag name
        classes: Class names
        value: Editable value
        text: Text content
        attached: False once removed from the document
        faults_pending: Number of upcoming primitive calls that raise (-1 = all)
        calls: Primitive calls made on this element, in order
    """

    element_id: str = ""
    tag: str = "div"
    classes: list[str] = field(default_factory=list)
    value: str = ""
    text: str = ""
    attached: bool = True
    faults_pending: int = 0
    calls: list[str] = field(default_factory=list)
    _host: MemoryHost | None = field(default=None, repr=False, compare=False)
    _fault: Exception | None = field(default=None, repr=False, compare=False)

    @property
    def locator(self) -> str:
        return f"#{self.element_id}" if self.element_id else self.tag

    def matches(self, tag: str | None, element_id: str | None, cls: str | None) -> bool:
        if tag and tag.lower() != self.tag.lower():
            return False
        if element_id and element_id != self.element_id:
            return False
        if cls and cls not in self.classes:
            return False
        return True

    def inject_faults(self, count: int = -1, error: Exception | None = None) -> None:
        """Make the next ``count`` primitive calls raise (``-1`` for every call)."""
        self.faults_pending = count
        self._fault = error

    def detach(self) -> None:
        """Remove the element from the document."""
        self.attached = False

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if not self.attached:
            raise ElementDetachedError(self.locator)
        if self.faults_pending:
            if self.faults_pending > 0:
                self.faults_pending -= 1
            raise self._fault or ElementFault(
                f"Injected fault during {operation}", locator=self.locator
            )

    def _dispatch(self, event_type: str) -> None:
        if self._host is not None:
            self._host.dispatch(InteractionEvent(event_type, self))

    async def click(self) -> None:
        await asyncio.sleep(0)
        self._check("click")
        self._dispatch(CLICK)

    async def set_value(self, value: str) -> None:
        await asyncio.sleep(0)
        self._check("set_value")
        self.value = value

    async def focus(self) -> None:
        await asyncio.sleep(0)
        self._check("focus")
        if self._host is not None:
            self._host.focused = self
        self._dispatch(FOCUS)

    async def text_content(self) -> str:
        await asyncio.sleep(0)
        self._check("text_content")
        return self.text

    def type_text(self, value: str) -> None:
        """Simulate the user typing: replace the value and fire ``input``."""
        self.value = value
        self._dispatch(INPUT)


class MemoryHost:
    """Host backed by an ordered list of :class:`MemoryElement`.

    Supported locators: ``#id``, ``.class``, ``tag``, ``tag#id``,
    ``tag.class``. The first attached match in insertion order wins.

    Example:
        >>> host = MemoryHost()
        >>> host.add(MemoryElement(element_id="login", tag="button"))
        >>> await host.resolve("#login")
    """

    def __init__(self, elements: list[MemoryElement] | None = None) -> None:
        self.elements: list[MemoryElement] = []
        self.focused: MemoryElement | None = None
        self._listeners: dict[str, list[EventHandler]] = {}
        for element in elements or []:
            self.add(element)

    def add(self, element: MemoryElement) -> MemoryElement:
        element._host = self
        self.elements.append(element)
        return element

    def find(self, locator: str) -> MemoryElement | None:
        """Synchronous lookup used by :meth:`resolve` and by tests."""
        match = _LOCATOR_RE.match(locator.strip()) if locator else None
        if not match or not any(match.groupdict().values()):
            logger.debug(f"Unsupported locator syntax: {locator!r}")
            return None
        tag, element_id, cls = match.group("tag"), match.group("id"), match.group("cls")
        for element in self.elements:
            if element.attached and element.matches(tag, element_id, cls):
                return element
        return None

    async def resolve(self, locator: str) -> MemoryElement | None:
        await asyncio.sleep(0)
        return self.find(locator)

    def add_listener(self, event_type: str, handler: EventHandler) -> None:
        self._listeners.setdefault(event_type, []).append(handler)

    def remove_listener(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._listeners.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def dispatch(self, event: InteractionEvent) -> None:
        for handler in list(self._listeners.get(event.event_type, [])):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Listener for {event.event_type} failed")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MemoryHost":
        """Build a host from a fixture record.

        Example fixture::

            {"elements": [{"id": "login", "tag": "button", "text": "Log in"},
                          {"id": "user", "tag": "input", "value": ""}]}
        """
        host = cls()
        for record in data.get("elements", []):
            element = MemoryElement(
                element_id=str(record.get("id", "")),
                tag=str(record.get("tag", "div")),
                classes=list(record.get("classes", [])),
                value=str(record.get("value", "")),
                text=str(record.get("text", "")),
                attached=bool(record.get("attached", True)),
            )
            faults = int(record.get("faults", 0))
            if faults:
                element.inject_faults(faults)
            host.add(element)
        return host

    @classmethod
    def from_file(cls, path: str | Path) -> "MemoryHost":
        """Load a fixture JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))

    def snapshot(self) -> list[dict[str, Any]]:
        """Element state for reporting."""
        return [
            {
                "locator": element.locator,
                "value": element.value,
                "text": element.text,
                "attached": element.attached,
                "focused": element is self.focused,
            }
            for element in self.elements
        ]
