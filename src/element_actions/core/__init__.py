"""Core infrastructure for element-actions."""

from element_actions.core.config import Config
from element_actions.core.exceptions import (
    DescriptorError,
    ElementActionsError,
    ElementDetachedError,
    ElementFault,
    StateTransitionError,
    UnsupportedOperationError,
)

__all__ = [
    "Config",
    "ElementActionsError",
    "UnsupportedOperationError",
    "DescriptorError",
    "ElementFault",
    "ElementDetachedError",
    "StateTransitionError",
]
