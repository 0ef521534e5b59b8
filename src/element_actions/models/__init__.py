"""Data models for element-actions."""

from element_actions.models.descriptor import (
    ActionDescriptor,
    FaultObserver,
    OperationKind,
    load_descriptors,
    parse_descriptors,
)
from element_actions.models.results import ActionResult, Fault

__all__ = [
    "ActionDescriptor",
    "OperationKind",
    "FaultObserver",
    "load_descriptors",
    "parse_descriptors",
    "Fault",
    "ActionResult",
]
