"""Overflow behaviour of element content."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class OverflowAxis(IntEnum):
    VISIBLE = 0
    CLIP = 1
    HIDDEN = 2
    SCROLL = 3


@dataclass(frozen=True)
class Overflow:
    """Overflow setting for each axis."""

    x: OverflowAxis
    y: OverflowAxis

    @classmethod
    def scroll(cls) -> Overflow:
        return cls(OverflowAxis.SCROLL, OverflowAxis.SCROLL)

    @classmethod
    def clip(cls) -> Overflow:
        return cls(OverflowAxis.CLIP, OverflowAxis.CLIP)

    @classmethod
    def hidden(cls) -> Overflow:
        return cls(OverflowAxis.HIDDEN, OverflowAxis.HIDDEN)

    @classmethod
    def visible(cls) -> Overflow:
        return cls(OverflowAxis.VISIBLE, OverflowAxis.VISIBLE)