"""Margins, paddings and flow direction."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .ui_unit import UiUnit
from .vec2 import Vec2


class FlexDirection(Enum):
    """Direction in which children are laid out."""

    VERTICAL = 0
    HORIZONTAL = 1


@dataclass(frozen=True)
class OutArea:
    """Space around the four edges of an element."""

    left: UiUnit = field(default_factory=UiUnit.zero)
    right: UiUnit = field(default_factory=UiUnit.zero)
    top: UiUnit = field(default_factory=UiUnit.zero)
    bottom: UiUnit = field(default_factory=UiUnit.zero)

    @classmethod
    def uniform(cls, pixel: float) -> OutArea:
        unit = UiUnit.px(pixel)
        return cls(unit, unit, unit, unit)

    @classmethod
    def horizontal(cls, value: UiUnit) -> OutArea:
        return cls(left=value, right=value)

    @classmethod
    def vertical(cls, value: UiUnit) -> OutArea:
        return cls(top=value, bottom=value)

    @classmethod
    def zero(cls) -> OutArea:
        return cls()

    def x(self, space: Vec2) -> float:
        return self.left.pixelx(space) + self.right.pixelx(space)

    def y(self, space: Vec2) -> float:
        return self.top.pixely(space) + self.bottom.pixely(space)

    def start(self, space: Vec2) -> Vec2:
        return Vec2(self.left.pixelx(space), self.top.pixely(space))

    def size(self, space: Vec2) -> Vec2:
        """Total extent; the bottom edge is resolved along the horizontal axis."""
        return Vec2(
            self.left.pixelx(space) + self.right.pixelx(space),
            self.top.pixely(space) + self.bottom.pixelx(space),
        )