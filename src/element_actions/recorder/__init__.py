"""Interaction recorder producing action descriptors."""

from element_actions.recorder.recorder import DescriptorRecorder, element_locator
from element_actions.recorder.states import STATE_FLOW, RecorderState, can_transition

__all__ = [
    "DescriptorRecorder",
    "element_locator",
    "RecorderState",
    "STATE_FLOW",
    "can_transition",
]
