"""Result models for element actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Fault:
    """Structured description of a failed attempt.

    Handed to ``on_attempt_error`` observers instead of the raw host
    exception.

    Attributes:
        locator: Locator of the descriptor that faulted
        kind: Operation kind (wire value)
        attempt: 0-based attempt index
        error_type: Class name of the underlying exception
        message: Exception message
        error: The underlying exception, for callers that need it
    """

    locator: str
    kind: str
    attempt: int
    error_type: str
    message: str
    error: BaseException | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(
        cls,
        error: BaseException,
        locator: str = "",
        kind: str = "",
        attempt: int = 0,
    ) -> "Fault":
        return cls(
            locator=locator,
            kind=kind,
            attempt=attempt,
            error_type=type(error).__name__,
            message=str(error),
            error=error,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "locator": self.locator,
            "kind": self.kind,
            "attempt": self.attempt,
            "error_type": self.error_type,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.error_type} on {self.kind} {self.locator} (attempt {self.attempt + 1}): {self.message}"


@dataclass
class ActionResult:
    """Outcome of resolving and applying one primitive.

    Exactly one of three shapes: not found, faulted, or succeeded.

    Attributes:
        found: Whether the locator resolved to an element
        fault: Fault raised while applying the primitive
        text: Text surfaced by READ_TEXT
    """

    found: bool
    fault: Fault | None = None
    text: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.found and self.fault is None

    @property
    def not_found(self) -> bool:
        return not self.found

    def __bool__(self) -> bool:
        return self.succeeded

    def __str__(self) -> str:
        if self.not_found:
            return "ActionResult(not found)"
        if self.fault:
            return f"ActionResult(fault={self.fault.error_type})"
        return "ActionResult(success)"
