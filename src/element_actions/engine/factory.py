"""Action factory: operation kind to invocable primitive."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from element_actions.core.exceptions import UnsupportedOperationError
from element_actions.models.descriptor import OperationKind
from element_actions.utils.redaction import mask_value

if TYPE_CHECKING:
    from element_actions.browser.host import ElementHandle


@dataclass(frozen=True)
class Activate:
    """Invoke the element's primary action (click)."""

    kind: ClassVar[OperationKind] = OperationKind.ACTIVATE

    async def __call__(self, handle: ElementHandle) -> None:
        await handle.click()

    def describe(self, redact: bool = True) -> str:
        return "activate"


@dataclass(frozen=True)
class SetValue:
    """Overwrite the element's editable value; "" clears it."""

    value: str = ""
    kind: ClassVar[OperationKind] = OperationKind.SET_VALUE

    async def __call__(self, handle: ElementHandle) -> None:
        await handle.set_value(self.value)

    def describe(self, redact: bool = True) -> str:
        return f"set_value {mask_value(self.value, redact)}"


@dataclass(frozen=True)
class Focus:
    """Move input focus to the element."""

    kind: ClassVar[OperationKind] = OperationKind.FOCUS

    async def __call__(self, handle: ElementHandle) -> None:
        await handle.focus()

    def describe(self, redact: bool = True) -> str:
        return "focus"


@dataclass(frozen=True)
class ReadText:
    """Read the element's text content. No mutation."""

    kind: ClassVar[OperationKind] = OperationKind.READ_TEXT

    async def __call__(self, handle: ElementHandle) -> str:
        return await handle.text_content()

    def describe(self, redact: bool = True) -> str:
        return "read_text"


ElementAction = Activate | SetValue | Focus | ReadText

_BUILDERS: dict[OperationKind, Callable[[str], ElementAction]] = {
    OperationKind.ACTIVATE: lambda value: Activate(),
    OperationKind.SET_VALUE: SetValue,
    OperationKind.FOCUS: lambda value: Focus(),
    OperationKind.READ_TEXT: lambda value: ReadText(),
}

_unmapped = set(OperationKind) - set(_BUILDERS)
if _unmapped:
    raise RuntimeError(f"No action builder for: {sorted(k.value for k in _unmapped)}")


def build_action(kind: OperationKind | str | Any, value: str = "") -> ElementAction:
    """Map an operation kind (and optional value) to an invocable action.

    Args:
        kind: Operation kind, or its wire value / name
        value: New value, only used by SET_VALUE

    Returns:
        Invocable action taking an element handle

    Raises:
        UnsupportedOperationError: If kind is not one of the known operations
    """
    operation = OperationKind.parse(kind)
    return _BUILDERS[operation](value)
