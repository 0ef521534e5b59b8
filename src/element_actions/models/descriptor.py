"""Action descriptor model and batch input loading."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Iterable

from element_actions.core.exceptions import DescriptorError, UnsupportedOperationError

if TYPE_CHECKING:
    from element_actions.models.results import Fault

logger = logging.getLogger(__name__)

FaultObserver = Callable[["Fault"], None]


class OperationKind(str, Enum):
    """Closed set of primitive operations.

    Values are the wire names used in descriptor files.
    """

    ACTIVATE = "click"
    SET_VALUE = "input"
    FOCUS = "focus"
    READ_TEXT = "readText"

    @classmethod
    def parse(cls, raw: Any) -> "OperationKind":
        """Resolve a member, wire value, or member name to an OperationKind.

        Args:
            raw: Kind as found in descriptor data

        Returns:
            Matching OperationKind

        Raises:
            UnsupportedOperationError: If raw names no known operation
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            for member in cls:
                if raw == member.value:
                    return member
            normalized = raw.strip().replace("-", "_").upper()
            if normalized in cls.__members__:
                return cls.__members__[normalized]
            # camelCase names such as "setValue" / "readText"
            squashed = normalized.replace("_", "")
            for name, member in cls.__members__.items():
                if name.replace("_", "") == squashed:
                    return member
        raise UnsupportedOperationError(raw)


# Accepted keys per field; first match wins.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "locator": ("locator", "selector"),
    "kind": ("kind", "type"),
    "value": ("value",),
    "delay_before_ms": ("delay_before_ms", "delayBeforeMs", "waitBefore"),
    "max_retries": ("max_retries", "maxRetries", "retries"),
}


def _pick(data: dict[str, Any], name: str) -> tuple[bool, Any]:
    for key in _FIELD_ALIASES[name]:
        if key in data:
            return True, data[key]
    return False, None


def _as_non_negative_int(name: str, raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise DescriptorError(f"{name} must be an integer", field=name, value=raw)
    if isinstance(raw, float) and not raw.is_integer():
        raise DescriptorError(f"{name} must be an integer", field=name, value=raw)
    value = int(raw)
    if value < 0:
        raise DescriptorError(f"{name} must be >= 0", field=name, value=raw)
    return value


@dataclass(frozen=True)
class ActionDescriptor:
    """A single declarative element action plus its execution policy.

    The kind is not checked here. It is checked when the action is built,
    so a batch containing a bad kind fails before anything runs.

    Attributes:
        locator: Identifies zero or one element; first match wins
        kind: Operation to perform
        value: New value, only used by SET_VALUE
        delay_before_ms: Wait once before the first attempt
        max_retries: Additional attempts after the first
        on_attempt_error: Observer called with a Fault for each failed attempt

    Example:
        >>> ActionDescriptor("#login", OperationKind.ACTIVATE, max_retries=2)
    """

    locator: str
    kind: OperationKind | str
    value: str = ""
    delay_before_ms: int = 0
    max_retries: int = 0
    on_attempt_error: FaultObserver | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.delay_before_ms < 0:
            raise DescriptorError(
                "delay_before_ms must be >= 0", field="delay_before_ms", value=self.delay_before_ms
            )
        if self.max_retries < 0:
            raise DescriptorError(
                "max_retries must be >= 0", field="max_retries", value=self.max_retries
            )

    @property
    def total_attempts(self) -> int:
        return self.max_retries + 1

    @property
    def kind_name(self) -> str:
        return self.kind.value if isinstance(self.kind, OperationKind) else str(self.kind)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        on_attempt_error: FaultObserver | None = None,
    ) -> "ActionDescriptor":
        """Build a descriptor from a wire record.

        Unknown keys are ignored and missing optional keys take defaults.

        Args:
            data: Descriptor record
            on_attempt_error: Observer to attach (records cannot carry one)

        Returns:
            ActionDescriptor

        Raises:
            DescriptorError: If required fields are missing or mistyped
        """
        if not isinstance(data, dict):
            raise DescriptorError("Descriptor must be an object", value=data)

        found, locator = _pick(data, "locator")
        if not found or not isinstance(locator, str):
            raise DescriptorError("Descriptor requires a string locator", field="locator", value=locator)

        found, kind = _pick(data, "kind")
        if not found or kind is None:
            raise DescriptorError("Descriptor requires a kind", field="kind")

        _, value = _pick(data, "value")
        if value is None:
            value = ""
        elif not isinstance(value, str):
            value = str(value)

        found, delay = _pick(data, "delay_before_ms")
        delay_ms = _as_non_negative_int("delay_before_ms", delay) if found else 0

        found, retries = _pick(data, "max_retries")
        max_retries = _as_non_negative_int("max_retries", retries) if found else 0

        if isinstance(kind, str):
            try:
                kind = OperationKind.parse(kind)
            except UnsupportedOperationError:
                # Kept as given; the action factory rejects it.
                pass

        return cls(
            locator=locator,
            kind=kind,
            value=value,
            delay_before_ms=delay_ms,
            max_retries=max_retries,
            on_attempt_error=on_attempt_error,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire record (the observer is not serializable)."""
        return {
            "locator": self.locator,
            "kind": self.kind_name,
            "value": self.value,
            "delayBeforeMs": self.delay_before_ms,
            "maxRetries": self.max_retries,
        }

    def __str__(self) -> str:
        return f"ActionDescriptor({self.kind_name} {self.locator or '<no locator>'})"


def parse_descriptors(
    records: Iterable[dict[str, Any]],
    on_attempt_error: FaultObserver | None = None,
) -> list[ActionDescriptor]:
    """Convert a sequence of wire records into descriptors, preserving order."""
    descriptors = []
    for index, record in enumerate(records):
        try:
            descriptors.append(ActionDescriptor.from_dict(record, on_attempt_error))
        except DescriptorError as e:
            e.details.setdefault("index", index)
            raise
    return descriptors


def load_descriptors(
    path: str | Path,
    on_attempt_error: FaultObserver | None = None,
) -> list[ActionDescriptor]:
    """Load descriptors from a JSON file.

    The file holds either a list of records or an object with an "actions"
    list.

    Args:
        path: JSON file path
        on_attempt_error: Observer attached to every descriptor

    Returns:
        Descriptors in file order

    Raises:
        DescriptorError: If the file cannot be read or has the wrong shape
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise DescriptorError(f"Could not read descriptors from {path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("actions")
    if not isinstance(raw, list):
        raise DescriptorError(f"{path} must contain a list of actions")

    descriptors = parse_descriptors(raw, on_attempt_error)
    logger.debug(f"Loaded {len(descriptors)} descriptors from {path}")
    return descriptors
