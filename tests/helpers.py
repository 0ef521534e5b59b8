"""Test doubles for hosts, elements and sleeping."""


class RecordingSleep:
    """Awaitable sleep stand-in that records requested durations."""

    def __init__(self, log: list | None = None) -> None:
        self.calls: list[float] = []
        self.log = log if log is not None else []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        self.log.append(("sleep", seconds))


class FlakyElement:
    """Element handle whose primitives fail a set number of times."""

    def __init__(self, failures: int = 0, error: Exception | None = None, log: list | None = None) -> None:
        self.failures = failures
        self.error = error or RuntimeError("element detached")
        self.calls = 0
        self.value = ""
        self.log = log if log is not None else []

    async def _attempt(self) -> None:
        self.calls += 1
        self.log.append(("call", self.calls))
        if self.failures < 0 or self.calls <= self.failures:
            raise self.error

    async def click(self) -> None:
        await self._attempt()

    async def set_value(self, value: str) -> None:
        await self._attempt()
        self.value = value

    async def focus(self) -> None:
        await self._attempt()

    async def text_content(self) -> str:
        await self._attempt()
        return "flaky"


class StaticHost:
    """Host resolving locators from a plain dict."""

    def __init__(self, elements: dict | None = None) -> None:
        self.elements = elements or {}
        self.resolved: list[str] = []

    async def resolve(self, locator: str):
        self.resolved.append(locator)
        return self.elements.get(locator)

