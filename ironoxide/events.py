"""Event results, dirty flags, selection tracking and queued UI events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional

from .kinds import ElementType, UiEvent


class EventResult(Enum):
    """Outcome of delivering a cursor event to an element."""

    NONE = 0
    OLD = 1
    NEW = 2

    def is_none(self) -> bool:
        return self is EventResult.NONE

    def is_new(self) -> bool:
        return self is EventResult.NEW

    def is_old(self) -> bool:
        return self is EventResult.OLD


class DirtyFlags(IntEnum):
    """What part of the UI must be refreshed."""

    NONE = 0
    RESIZE = 1
    COLOR = 2
    SIZE = 3


class SelectedFlags(IntEnum):
    """How the current element is selected."""

    NULL = 0
    SELECTED = 1
    PRESSED = 2


@dataclass
class Selected:
    """The element under the cursor, if any, and how it is held."""

    element: Optional[Any] = None
    selected: SelectedFlags = SelectedFlags.NULL

    def clear(self) -> None:
        self.element = None
        self.selected = SelectedFlags.NULL

    def set_selected(self, element: Any) -> None:
        self.element = element
        self.selected = SelectedFlags.SELECTED

    def set_pressed(self, element: Any) -> None:
        self.element = element
        self.selected = SelectedFlags.PRESSED

    def is_none(self) -> bool:
        return self.element is None

    def id(self) -> int:
        """Id of the selected element, or 0 when nothing is selected."""
        if self.element is None:
            return 0
        return self.element.id

    def pressed(self) -> bool:
        return self.selected is SelectedFlags.PRESSED


@dataclass(frozen=True)
class QueuedEvent:
    """An event raised by an element, waiting to be handled by the application."""

    element_id: int
    element_type: ElementType
    event: UiEvent
    message: int

    @classmethod
    def from_element(cls, element: Any, event: UiEvent, message: int) -> QueuedEvent:
        """Build an event from an element carrying ``id`` and ``typ``."""
        return cls(
            element_id=element.id,
            element_type=element.typ,
            event=event,
            message=message,
        )


@dataclass(frozen=True)
class CallbackResult:
    """Whether a callback asks for the UI to be rebuilt."""

    rebuild: bool

    @classmethod
    def rebuild_needed(cls) -> CallbackResult:
        return cls(True)

    @classmethod
    def no_rebuild(cls) -> CallbackResult:
        return cls(False)