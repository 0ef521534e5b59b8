"""Records user interactions as action descriptors."""

from __future__ import annotations

import logging
from typing import Any

from element_actions.browser.host import (
    CLICK,
    EVENT_TYPES,
    FOCUS,
    INPUT,
    EventSource,
    InteractionEvent,
)
from element_actions.core.config import Config
from element_actions.core.exceptions import StateTransitionError
from element_actions.models.descriptor import ActionDescriptor, FaultObserver, OperationKind
from element_actions.models.results import Fault
from element_actions.recorder.states import RecorderState, can_transition

logger = logging.getLogger(__name__)

_EVENT_KINDS = {
    CLICK: OperationKind.ACTIVATE,
    INPUT: OperationKind.SET_VALUE,
    FOCUS: OperationKind.FOCUS,
}


def element_locator(element: Any) -> str:
    """Id-based locator for an element, or "" when it has no id."""
    element_id = getattr(element, "element_id", None) or getattr(element, "id", None)
    if element_id:
        return f"#{element_id}"
    return ""


def _replay_error_logger(kind: OperationKind, locator: str) -> FaultObserver:
    def log_fault(fault: Fault) -> None:
        logger.error(f"Replaying {kind.value} on {locator or '<no locator>'} failed: {fault}")

    return log_fault


class DescriptorRecorder:
    """Turns click/input/focus events into descriptors.

    The first click after :meth:`start` only arms the recorder and produces
    no descriptor. Recorded descriptors carry a fixed pre-delay and retry
    count taken from the config (200 ms and 2 retries by default).

    Example:
        >>> recorder = DescriptorRecorder()
        >>> recorder.start(host)
        >>> ...  # user clicks "Record", then interacts with the page
        >>> recorder.stop()
        >>> descriptors = recorder.get_recorded()
    """

    def __init__(self, config: Config | None = None) -> None:
        """Initialize the recorder.

        Args:
            config: Optional configuration (recorder delay and retries)
        """
        self.config = config or Config.from_env()
        self.state = RecorderState.IDLE
        self._recorded: list[ActionDescriptor] = []
        self._source: EventSource | None = None

    @property
    def is_recording(self) -> bool:
        return self.state.is_listening

    def _transition(self, target: RecorderState) -> None:
        if not can_transition(self.state, target):
            raise StateTransitionError(
                f"Cannot move recorder from {self.state.value} to {target.value}",
                current_state=self.state.value,
                attempted_state=target.value,
            )
        logger.debug(f"Recorder: {self.state.value} -> {target.value}")
        self.state = target

    def start(self, source: EventSource | None = None) -> None:
        """Start listening. Events can come from ``source`` or :meth:`handle_event`."""
        if self.state.is_listening:
            logger.info("Recorder already started")
            return
        self._transition(RecorderState.ARMED)
        if source is not None:
            for event_type in EVENT_TYPES:
                source.add_listener(event_type, self.handle_event)
            self._source = source

    def stop(self) -> None:
        """Stop listening. Recorded descriptors are kept."""
        if self._source is not None:
            for event_type in EVENT_TYPES:
                self._source.remove_listener(event_type, self.handle_event)
            self._source = None
        if self.state.is_listening:
            self._transition(RecorderState.IDLE)

    def handle_event(self, event: InteractionEvent) -> None:
        if not self.state.is_listening:
            return
        if self.state is RecorderState.ARMED and event.event_type == CLICK:
            # The click that started the recording
            self._transition(RecorderState.RECORDING)
            return
        descriptor = self._to_descriptor(event)
        if descriptor is not None:
            self._recorded.append(descriptor)
            logger.debug(f"Recorded {descriptor}")

    def _to_descriptor(self, event: InteractionEvent) -> ActionDescriptor | None:
        kind = _EVENT_KINDS.get(event.event_type)
        if kind is None:
            logger.debug(f"Ignoring {event.event_type} event")
            return None
        locator = element_locator(event.target)
        value = ""
        if kind is OperationKind.SET_VALUE:
            value = str(getattr(event.target, "value", "") or "")
        return ActionDescriptor(
            locator=locator,
            kind=kind,
            value=value,
            delay_before_ms=self.config.recorder_delay_ms,
            max_retries=self.config.recorder_retries,
            on_attempt_error=_replay_error_logger(kind, locator),
        )

    def get_recorded(self) -> list[ActionDescriptor]:
        """Descriptors recorded so far, in event order."""
        return list(self._recorded)

    def clear(self) -> None:
        self._recorded.clear()
