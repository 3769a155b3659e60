"""Layout units and alignment used by the UI builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .vec2 import Vec2


class UnitKind(Enum):
    """The kind of a layout unit."""

    ZERO = 0
    UNDEFINED = 1
    AUTO = 2
    FILL = 3
    PX = 4
    RELATIVE = 5
    RELATIVE_HEIGHT = 6
    RELATIVE_WIDTH = 7
    RELATIVE_MAX = 8
    RELATIVE_MIN = 9
    REM = 10


_PLACEHOLDER_SIZE = 100.0
_FILL_SIZE = 1.77


@dataclass(frozen=True)
class UiUnit:
    """A length that resolves to pixels against the available space."""

    kind: UnitKind
    value: float = 0.0

    @classmethod
    def zero(cls) -> UiUnit:
        return cls(UnitKind.ZERO)

    @classmethod
    def undefined(cls) -> UiUnit:
        return cls(UnitKind.UNDEFINED)

    @classmethod
    def auto(cls) -> UiUnit:
        return cls(UnitKind.AUTO)

    @classmethod
    def fill(cls) -> UiUnit:
        return cls(UnitKind.FILL)

    @classmethod
    def px(cls, value: float) -> UiUnit:
        return cls(UnitKind.PX, value)

    @classmethod
    def relative(cls, value: float) -> UiUnit:
        return cls(UnitKind.RELATIVE, value)

    @classmethod
    def relative_height(cls, value: float) -> UiUnit:
        return cls(UnitKind.RELATIVE_HEIGHT, value)

    @classmethod
    def relative_width(cls, value: float) -> UiUnit:
        return cls(UnitKind.RELATIVE_WIDTH, value)

    @classmethod
    def relative_max(cls, value: float) -> UiUnit:
        return cls(UnitKind.RELATIVE_MAX, value)

    @classmethod
    def relative_min(cls, value: float) -> UiUnit:
        return cls(UnitKind.RELATIVE_MIN, value)

    @classmethod
    def rem(cls, value: float) -> UiUnit:
        return cls(UnitKind.REM, value)

    def _common(self, space: Vec2) -> float | None:
        match self.kind:
            case UnitKind.ZERO:
                return 0.0
            case UnitKind.UNDEFINED | UnitKind.AUTO:
                return _PLACEHOLDER_SIZE
            case UnitKind.FILL:
                return _FILL_SIZE
            case UnitKind.PX | UnitKind.REM:
                return self.value
            case UnitKind.RELATIVE_MAX:
                return space.max() * self.value
            case UnitKind.RELATIVE_MIN:
                return space.min() * self.value
        return None

    def pixelx(self, space: Vec2) -> float:
        """Resolve along the horizontal axis."""
        common = self._common(space)
        if common is not None:
            return common
        if self.kind is UnitKind.RELATIVE_HEIGHT:
            return space.y * self.value
        return space.x * self.value

    def pixely(self, space: Vec2) -> float:
        """Resolve along the vertical axis."""
        common = self._common(space)
        if common is not None:
            return common
        if self.kind is UnitKind.RELATIVE_WIDTH:
            return space.x * self.value
        return space.y * self.value


class Align(Enum):
    """Where an element is anchored inside its space."""

    CENTER = 0
    TOP = 1
    TOP_RIGHT = 2
    RIGHT = 3
    BOTTOM_RIGHT = 4
    BOTTOM = 5
    BOTTOM_LEFT = 6
    LEFT = 7
    TOP_LEFT = 8

    def get_pos(self, space: Vec2, size: Vec2, offset: Vec2) -> Vec2:
        """Position of an element of the given size inside space."""
        centre_x = (space.x - size.x) * 0.5 + offset.x
        centre_y = (space.y - size.y) * 0.5 + offset.y
        right = space.x - size.x - offset.x
        bottom = space.y - size.y - offset.y
        match self:
            case Align.CENTER:
                return (space - size) * 0.5 + offset
            case Align.TOP:
                return Vec2(centre_x, offset.y)
            case Align.TOP_RIGHT:
                return Vec2(right, offset.x)
            case Align.RIGHT:
                return Vec2(right, centre_y)
            case Align.BOTTOM_RIGHT:
                return Vec2(right, bottom)
            case Align.BOTTOM:
                return Vec2(centre_x, bottom)
            case Align.BOTTOM_LEFT:
                return Vec2(offset.x, bottom)
            case Align.LEFT:
                return Vec2(offset.x, centre_y)
        return Vec2(offset.x, offset.y)

    def is_horizontal_centered(self) -> bool:
        return self in (Align.CENTER, Align.TOP, Align.BOTTOM)

    def is_vertical_centered(self) -> bool:
        return self in (Align.CENTER, Align.RIGHT, Align.LEFT)