"""Fault aggregation built on the per-descriptor observer hook."""

from __future__ import annotations

import logging
from collections import defaultdict

from element_actions.models.results import Fault

logger = logging.getLogger(__name__)


class FaultCollector:
    """Observer that records every Fault it is handed.

    Boolean results cannot tell "never found" from "found but every attempt
    faulted"; attaching a collector can.

    Example:
        >>> collector = FaultCollector()
        >>> descriptors = load_descriptors("actions.json", on_attempt_error=collector)
        >>> await run_all(host, descriptors)
        >>> collector.by_locator()
    """

    def __init__(self, log_faults: bool = False) -> None:
        self.faults: list[Fault] = []
        self._log_faults = log_faults

    def __call__(self, fault: Fault) -> None:
        self.faults.append(fault)
        if self._log_faults:
            logger.error(str(fault))

    def __len__(self) -> int:
        return len(self.faults)

    def by_locator(self) -> dict[str, list[Fault]]:
        """Faults grouped by locator, attempt order kept."""
        grouped: dict[str, list[Fault]] = defaultdict(list)
        for fault in self.faults:
            grouped[fault.locator].append(fault)
        return dict(grouped)

    def faulted(self, locator: str) -> bool:
        """Whether ``locator`` was found at least once but faulted."""
        return any(fault.locator == locator for fault in self.faults)

    def clear(self) -> None:
        self.faults.clear()
