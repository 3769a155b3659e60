"""Small enumerations and the computed geometry of a UI element."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .vec2 import Vec2


class Interaction(IntEnum):
    NONE = 0
    HOVER = 1
    PRESSED = 2
    DRAGGED = 3


class RenderMode(Enum):
    ABSOLUTE = 0
    INLINE = 1


class ElementType(IntEnum):
    NONE = 0
    BLOCK = 1
    ABSOLUTE_LAYOUT = 2
    BUTTON = 3
    TEXT = 4


class UiEvent(Enum):
    PRESS = 0
    RELEASE = 1
    MOVE = 2


@dataclass
class RawUiElement:
    """Computed position, size and decoration of an element."""

    pos: Vec2 = field(default_factory=Vec2.zero)
    size: Vec2 = field(default_factory=Vec2.zero)
    border: float = 0.0
    view: Vec2 = field(default_factory=Vec2.zero)
    corner: float = 0.0