"""Utility modules for element-actions."""

from element_actions.utils.redaction import REDACTED, mask_value

__all__ = [
    "REDACTED",
    "mask_value",
]
