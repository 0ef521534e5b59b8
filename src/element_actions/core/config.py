"""Configuration management for element-actions."""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


@dataclass
class Config:
    """Global configuration for element-actions.

    All values can be overridden via environment variables with the
    ELEMENT_ACTIONS_ prefix.
    Example: ELEMENT_ACTIONS_RECORDER_RETRIES=3
    """

    # Logging
    log_level: str = field(
        default_factory=lambda: os.environ.get("ELEMENT_ACTIONS_LOG_LEVEL", "INFO")
    )
    redact_values: bool = field(
        default_factory=lambda: _env_bool("ELEMENT_ACTIONS_REDACT_VALUES", "true")
    )

    # Recorder defaults stamped onto every recorded descriptor
    recorder_delay_ms: int = field(
        default_factory=lambda: int(os.environ.get("ELEMENT_ACTIONS_RECORDER_DELAY_MS", "200"))
    )
    recorder_retries: int = field(
        default_factory=lambda: int(os.environ.get("ELEMENT_ACTIONS_RECORDER_RETRIES", "2"))
    )

    # Browser host settings
    browser_headless: bool = field(
        default_factory=lambda: _env_bool("ELEMENT_ACTIONS_BROWSER_HEADLESS", "true")
    )
    browser_timeout_ms: int = field(
        default_factory=lambda: int(os.environ.get("ELEMENT_ACTIONS_BROWSER_TIMEOUT_MS", "30000"))
    )

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a value is out of range.
        """
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.recorder_delay_ms < 0:
            raise ValueError("ELEMENT_ACTIONS_RECORDER_DELAY_MS must be >= 0")
        if self.recorder_retries < 0:
            raise ValueError("ELEMENT_ACTIONS_RECORDER_RETRIES must be >= 0")
        if self.browser_timeout_ms <= 0:
            raise ValueError("ELEMENT_ACTIONS_BROWSER_TIMEOUT_MS must be > 0")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for the configured name."""
        return getattr(logging, self.log_level.upper(), logging.INFO)

    @classmethod
    def from_env(cls) -> "Config":
        """Create a Config instance from environment variables.

        Returns:
            Config instance with values from environment.
        """
        return cls()
