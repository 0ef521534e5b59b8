"""Tests for host environments."""

import asyncio
import json
from unittest.mock import AsyncMock, Mock

import pytest

from element_actions.browser.host import EventSource, InteractionEvent
from element_actions.browser.memory import MemoryElement, MemoryHost
from element_actions.browser.playwright_host import PlaywrightElement, PlaywrightHost
from element_actions.core.exceptions import ElementDetachedError, ElementFault


class TestMemoryHostResolution:
    """Tests for MemoryHost locator resolution."""

    def test_by_id(self, page_host):
        """Test #id locators."""
        assert page_host.find("#a").text == "Log in"

    def test_by_tag(self, page_host):
        """Test bare tag locators."""
        assert page_host.find("input").element_id == "b"

    def test_by_class_first_match(self, page_host):
        """Test the first matching element wins."""
        assert page_host.find(".item").text == "first"

    def test_tag_and_class(self, page_host):
        """Test tag.class locators."""
        assert page_host.find("li.item").text == "first"
        assert page_host.find("p.item") is None

    def test_tag_and_id(self, page_host):
        """Test tag#id locators."""
        assert page_host.find("button#a") is page_host.find("#a")
        assert page_host.find("input#a") is None

    @pytest.mark.parametrize("locator", ["", "#", "div > p", "[name=x]", "#missing"])
    def test_unmatched(self, page_host, locator):
        """Test unsupported or unmatched locators resolve to None."""
        assert page_host.find(locator) is None

    def test_detached_not_resolved(self, page_host):
        """Test detached elements are skipped."""
        page_host.find("#a").detach()
        assert asyncio.run(page_host.resolve("#a")) is None

    def test_resolve_async(self, page_host):
        """Test async resolution."""
        assert asyncio.run(page_host.resolve("#msg")).text == "Welcome back"


class TestMemoryElement:
    """Tests for MemoryElement primitives."""

    def test_set_value(self, page_host):
        """Test set_value overwrites the value."""
        element = page_host.find("#b")
        asyncio.run(element.set_value("new"))
        assert element.value == "new"

    def test_focus_tracked(self, page_host):
        """Test focus moves to the element."""
        element = page_host.find("#b")
        asyncio.run(element.focus())
        assert page_host.focused is element

    def test_detached_raises(self, page_host):
        """Test primitives on a detached element raise."""
        element = page_host.find("#a")
        element.detach()
        with pytest.raises(ElementDetachedError):
            asyncio.run(element.click())

    def test_injected_faults_count_down(self):
        """Test injected faults apply to the next N calls only."""
        element = MemoryElement(element_id="x")
        element.inject_faults(2)
        for _ in range(2):
            with pytest.raises(ElementFault):
                asyncio.run(element.click())
        asyncio.run(element.click())
        assert element.calls == ["click", "click", "click"]

    def test_injected_custom_error(self):
        """Test injecting a specific exception."""
        element = MemoryElement(element_id="x")
        element.inject_faults(-1, TimeoutError("slow"))
        with pytest.raises(TimeoutError):
            asyncio.run(element.text_content())
        with pytest.raises(TimeoutError):
            asyncio.run(element.text_content())

    def test_locator(self):
        """Test element locator form."""
        assert MemoryElement(element_id="x").locator == "#x"
        assert MemoryElement(tag="span").locator == "span"


class TestMemoryHostEvents:
    """Tests for MemoryHost event dispatch."""

    def test_is_event_source(self, page_host):
        """Test MemoryHost satisfies the EventSource protocol."""
        assert isinstance(page_host, EventSource)

    def test_click_dispatches(self, page_host):
        """Test click fires click listeners."""
        events = []
        page_host.add_listener("click", events.append)
        asyncio.run(page_host.find("#a").click())
        assert events == [InteractionEvent("click", page_host.find("#a"))]

    def test_focus_dispatches(self, page_host):
        """Test focus fires focus listeners."""
        events = []
        page_host.add_listener("focus", events.append)
        asyncio.run(page_host.find("#b").focus())
        assert [e.event_type for e in events] == ["focus"]

    def test_set_value_silent(self, page_host):
        """Test programmatic value changes fire nothing."""
        events = []
        page_host.add_listener("input", events.append)
        asyncio.run(page_host.find("#b").set_value("x"))
        assert events == []

    def test_type_text_dispatches_input(self, page_host):
        """Test simulated typing fires input."""
        events = []
        page_host.add_listener("input", events.append)
        page_host.find("#b").type_text("bob")
        assert len(events) == 1
        assert events[0].target.value == "bob"

    def test_remove_listener(self, page_host):
        """Test removed listeners stop receiving events."""
        events = []
        page_host.add_listener("click", events.append)
        page_host.remove_listener("click", events.append)
        page_host.remove_listener("click", events.append)
        asyncio.run(page_host.find("#a").click())
        assert events == []

    def test_listener_error_contained(self, page_host):
        """Test a failing listener does not stop dispatch."""
        events = []
        page_host.add_listener("click", Mock(side_effect=RuntimeError("bad")))
        page_host.add_listener("click", events.append)
        asyncio.run(page_host.find("#a").click())
        assert len(events) == 1


class TestMemoryHostFixtures:
    """Tests for building hosts from fixtures."""

    def test_from_dict(self, fixture_data):
        """Test fixture records become elements."""
        host = MemoryHost.from_dict(fixture_data)
        assert [e.locator for e in host.elements] == ["#a", "#b", "#flaky"]
        assert host.find("#a").tag == "button"
        assert host.find("#flaky").faults_pending == 1

    def test_from_file(self, tmp_path, fixture_data):
        """Test loading a fixture file."""
        path = tmp_path / "page.json"
        path.write_text(json.dumps(fixture_data))
        host = MemoryHost.from_file(path)
        assert host.find("#b").value == ""

    def test_snapshot(self, page_host):
        """Test snapshot reports element state."""
        asyncio.run(page_host.find("#b").focus())
        snapshot = page_host.snapshot()
        assert snapshot[1] == {
            "locator": "#b",
            "value": "initial",
            "text": "",
            "attached": True,
            "focused": True,
        }


class TestPlaywrightHost:
    """Tests for the Playwright adapter."""

    @pytest.fixture
    def handle(self):
        handle = Mock()
        handle.click = AsyncMock()
        handle.fill = AsyncMock()
        handle.focus = AsyncMock()
        handle.text_content = AsyncMock(return_value="Hello")
        return handle

    @pytest.fixture
    def page(self, handle):
        page = Mock()
        page.query_selector = AsyncMock(return_value=handle)
        return page

    def test_resolve(self, page):
        """Test resolution wraps the handle."""
        element = asyncio.run(PlaywrightHost(page).resolve("#login"))
        assert isinstance(element, PlaywrightElement)
        assert element.locator == "#login"
        page.query_selector.assert_awaited_once_with("#login")

    def test_resolve_missing(self, page):
        """Test no handle resolves to None."""
        page.query_selector.return_value = None
        assert asyncio.run(PlaywrightHost(page).resolve("#nope")) is None

    def test_resolve_error(self, page):
        """Test selector errors resolve to None."""
        page.query_selector.side_effect = RuntimeError("Unexpected token")
        assert asyncio.run(PlaywrightHost(page).resolve("##")) is None

    def test_primitives(self, handle):
        """Test each primitive maps to the Playwright call."""
        element = PlaywrightElement(handle, "#x", timeout_ms=500)
        asyncio.run(element.click())
        asyncio.run(element.set_value("v"))
        asyncio.run(element.focus())
        assert asyncio.run(element.text_content()) == "Hello"
        handle.click.assert_awaited_once_with(timeout=500)
        handle.fill.assert_awaited_once_with("v", timeout=500)
        handle.focus.assert_awaited_once_with()

    def test_no_timeout(self, handle):
        """Test no timeout keyword without a configured timeout."""
        asyncio.run(PlaywrightElement(handle, "#x").click())
        handle.click.assert_awaited_once_with()

    def test_text_content_none(self, handle):
        """Test missing text reads as empty."""
        handle.text_content.return_value = None
        assert asyncio.run(PlaywrightElement(handle, "#x").text_content()) == ""
