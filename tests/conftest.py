"""Pytest configuration and fixtures for element-actions tests."""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from element_actions.browser.memory import MemoryElement, MemoryHost  # noqa: E402
from element_actions.core.config import Config  # noqa: E402
from tests.helpers import RecordingSleep  # noqa: E402


@pytest.fixture
def page_host() -> MemoryHost:
    """Small login page."""
    return MemoryHost([
        MemoryElement(element_id="a", tag="button", text="Log in"),
        MemoryElement(element_id="b", tag="input", value="initial"),
        MemoryElement(element_id="msg", tag="p", text="Welcome back"),
        MemoryElement(tag="li", classes=["item"], text="first"),
        MemoryElement(tag="li", classes=["item"], text="second"),
    ])


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def config() -> Config:
    """Configuration independent of the environment."""
    return Config(
        log_level="DEBUG",
        redact_values=True,
        recorder_delay_ms=200,
        recorder_retries=2,
        browser_headless=True,
        browser_timeout_ms=30000,
    )


@pytest.fixture
def fixture_data() -> dict:
    """Element fixture in the on-disk format."""
    return {
        "elements": [
            {"id": "a", "tag": "button", "text": "Go"},
            {"id": "b", "tag": "input", "value": ""},
            {"id": "flaky", "tag": "button", "faults": 1},
        ]
    }
