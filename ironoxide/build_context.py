"""State carried while laying out a tree of elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .font import Font
from .kinds import RawUiElement
from .style import FlexDirection
from .vec2 import Vec2


@dataclass
class BuildContext:
    """Layout cursor for the children of one element."""

    font: Font
    available_size: Vec2 = field(default_factory=Vec2.zero)
    child_start_pos: Vec2 = field(default_factory=Vec2.zero)
    element_size: Vec2 = field(default_factory=Vec2.zero)
    element_pos: Vec2 = field(default_factory=Vec2.zero)
    line_offset: float = 0.0
    start_pos: Vec2 = field(default_factory=Vec2.zero)
    flex_direction: FlexDirection = FlexDirection.VERTICAL
    parent: Optional[RawUiElement] = None
    order: int = 0

    @classmethod
    def root(cls, font: Font, parent_size: Vec2) -> BuildContext:
        """Context for top-level elements filling the given size."""
        return cls(font=font, available_size=Vec2(parent_size.x, parent_size.y))

    @classmethod
    def from_parent(
        cls,
        context: BuildContext,
        available_size: Vec2,
        child_start_pos: Vec2,
        parent: RawUiElement,
        flex_direction: FlexDirection,
    ) -> BuildContext:
        """Context for the children of an element, sharing the parent's font."""
        return cls(
            font=context.font,
            available_size=Vec2(available_size.x, available_size.y),
            child_start_pos=Vec2(child_start_pos.x, child_start_pos.y),
            flex_direction=flex_direction,
            parent=parent,
        )

    def fits_in_line(self, pos: Vec2, size: Vec2) -> tuple[Vec2, bool]:
        """Place an element of size; return its moved position and whether it fit the line."""
        start = self.start_pos
        if self.flex_direction is FlexDirection.HORIZONTAL:
            if self.available_size.x - start.x >= size.x:
                placed = pos + start
                self.line_offset = max(self.line_offset, size.y)
                self.start_pos = Vec2(start.x + size.x, start.y)
                return placed, True
            new_y = start.y + self.line_offset
            self.start_pos = Vec2(size.x, new_y)
            self.line_offset = size.y
            return Vec2(pos.x, pos.y + new_y), False

        if self.available_size.y - start.y >= size.y:
            placed = pos + start
            self.line_offset = max(self.line_offset, size.x)
            self.start_pos = Vec2(start.x, start.y + size.y)
            return placed, True
        new_x = start.x + self.line_offset
        self.start_pos = Vec2(new_x, size.y)
        self.line_offset = size.x
        return Vec2(pos.x + new_x, pos.y), False

    def apply_data(self, pos: Vec2, size: Vec2) -> None:
        """Record the final position and size of the element just built."""
        self.element_pos = Vec2(pos.x, pos.y)
        self.element_size = Vec2(size.x, size.y)