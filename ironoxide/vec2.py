"""Two-component float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, Optional

F32_MAX = 3.4028234663852886e38


def _div(a: float, b: float) -> float:
    """Divide with IEEE semantics for a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


@dataclass(slots=True)
class Vec2:
    """A 2D vector with component-wise arithmetic and partial ordering."""

    x: float = 0.0
    y: float = 0.0

    MAX: ClassVar[Vec2]
    MIN: ClassVar[Vec2]

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vec2:
        return cls(1.0, 1.0)

    def min(self) -> float:
        """The smaller of the two components."""
        return self.x if self.x < self.y else self.y

    def max(self) -> float:
        """The larger of the two components."""
        return self.x if self.x > self.y else self.y

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def _apply(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Vec2):
            return Vec2(op(self.x, other.x), op(self.y, other.y))
        if _is_scalar(other):
            return Vec2(op(self.x, other), op(self.y, other))
        return NotImplemented

    def _apply_in_place(self, other: object, op: Callable[[float, float], float], scalar: bool):
        if isinstance(other, Vec2):
            self.x = op(self.x, other.x)
            self.y = op(self.y, other.y)
            return self
        if scalar and _is_scalar(other):
            self.x = op(self.x, other)
            self.y = op(self.y, other)
            return self
        return NotImplemented

    def __add__(self, other):
        return self._apply(other, lambda a, b: a + b)

    def __iadd__(self, other):
        return self._apply_in_place(other, lambda a, b: a + b, scalar=False)

    def __sub__(self, other):
        return self._apply(other, lambda a, b: a - b)

    def __isub__(self, other):
        return self._apply_in_place(other, lambda a, b: a - b, scalar=False)

    def __mul__(self, other):
        return self._apply(other, lambda a, b: a * b)

    def __imul__(self, other):
        return self._apply_in_place(other, lambda a, b: a * b, scalar=False)

    def __truediv__(self, other):
        return self._apply(other, _div)

    def __itruediv__(self, other):
        return self._apply_in_place(other, _div, scalar=True)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def _partial_cmp(self, other: Vec2) -> Optional[int]:
        if self.x > other.x and self.y > other.y:
            return 1
        if self.x < other.x and self.y < other.y:
            return -1
        if self == other:
            return 0
        return None

    def __lt__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self._partial_cmp(other) == -1

    def __gt__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self._partial_cmp(other) == 1

    def __le__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self._partial_cmp(other) in (-1, 0)

    def __ge__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self._partial_cmp(other) in (1, 0)


Vec2.MAX = Vec2(F32_MAX, F32_MAX)
Vec2.MIN = Vec2(-F32_MAX, -F32_MAX)