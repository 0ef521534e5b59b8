"""Playwright-backed host.

Requires the ``browser`` extra (``pip install element-actions[browser]``)
for :func:`open_page`; :class:`PlaywrightHost` only needs an async ``Page``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator

if TYPE_CHECKING:
    from playwright.async_api import ElementHandle as PWElementHandle
    from playwright.async_api import Page

logger = logging.getLogger(__name__)


class PlaywrightElement:
    """Adapts a Playwright element handle to the primitive operations."""

    def __init__(self, handle: "PWElementHandle", locator: str, timeout_ms: float | None = None) -> None:
        self._handle = handle
        self.locator = locator
        self._timeout = timeout_ms

    def _options(self) -> dict[str, Any]:
        return {"timeout": self._timeout} if self._timeout is not None else {}

    async def click(self) -> None:
        await self._handle.click(**self._options())

    async def set_value(self, value: str) -> None:
        await self._handle.fill(value, **self._options())

    async def focus(self) -> None:
        await self._handle.focus()

    async def text_content(self) -> str:
        return await self._handle.text_content() or ""


class PlaywrightHost:
    """Resolves CSS locators on a Playwright page.

    Example:
        async with open_page("https://example.com") as page:
            results = await run_all(PlaywrightHost(page), descriptors)
    """

    def __init__(self, page: "Page", timeout_ms: float | None = None) -> None:
        self.page = page
        self.timeout_ms = timeout_ms

    async def resolve(self, locator: str) -> PlaywrightElement | None:
        try:
            handle = await self.page.query_selector(locator)
        except Exception as e:
            # Invalid selector syntax or a closed page reads as "no element"
            logger.warning(f"Could not resolve {locator!r}: {e}")
            return None
        if handle is None:
            return None
        return PlaywrightElement(handle, locator, self.timeout_ms)


@asynccontextmanager
async def open_page(
    url: str,
    headless: bool = True,
    timeout_ms: float = 30000,
) -> AsyncIterator["Page"]:
    """Launch Chromium, load ``url`` and yield the page.

    Args:
        url: Page the batch runs against
        headless: Run without a visible window
        timeout_ms: Default timeout for page operations

    Yields:
        Loaded Playwright page
    """
    from playwright.async_api import async_playwright

    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=headless)
        try:
            page = await browser.new_page()
            page.set_default_timeout(timeout_ms)
            logger.info(f"Loading {url}")
            await page.goto(url, wait_until="load")
            yield page
        finally:
            await browser.close()
