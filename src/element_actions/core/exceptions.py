"""Custom exceptions for element-actions."""

from typing import Any


class ElementActionsError(Exception):
    """Base exception for all element-actions errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class UnsupportedOperationError(ElementActionsError):
    """Raised when a descriptor names an operation kind outside the closed set."""

    def __init__(
        self,
        kind: Any,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message or f"Unsupported operation kind: {kind!r}", details)
        self.kind = kind


class DescriptorError(ElementActionsError):
    """Raised when descriptor input is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.field = field
        self.value = value


class ElementFault(ElementActionsError):
    """Raised by a host when a primitive cannot be applied to an element."""

    def __init__(
        self,
        message: str,
        locator: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.locator = locator


class ElementDetachedError(ElementFault):
    """Raised when an element was removed between resolution and use."""

    def __init__(
        self,
        locator: str | None = None,
        message: str = "Element is detached from the document",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, locator, details)


class StateTransitionError(ElementActionsError):
    """Raised when an invalid state transition is attempted."""

    def __init__(
        self,
        message: str,
        current_state: str,
        attempted_state: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.current_state = current_state
        self.attempted_state = attempted_state
