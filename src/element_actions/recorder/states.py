"""State definitions for the descriptor recorder."""

from enum import Enum


class RecorderState(str, Enum):
    """Lifecycle of a :class:`DescriptorRecorder`.

    - IDLE - not listening; events are ignored
    - ARMED - listening; the first click only arms the recorder
    - RECORDING - every click/input/focus becomes a descriptor
    """

    IDLE = "idle"
    ARMED = "armed"
    RECORDING = "recording"

    @property
    def is_listening(self) -> bool:
        """Check if events are being observed."""
        return self is not RecorderState.IDLE


# Allowed transitions
STATE_FLOW: dict[RecorderState, set[RecorderState]] = {
    RecorderState.IDLE: {RecorderState.ARMED},
    RecorderState.ARMED: {RecorderState.RECORDING, RecorderState.IDLE},
    RecorderState.RECORDING: {RecorderState.IDLE},
}


def can_transition(current: RecorderState, target: RecorderState) -> bool:
    return target in STATE_FLOW.get(current, set())
