"""Four-component float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator, Optional


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
class Vec4:
    """A 4D vector with component-wise arithmetic and partial ordering."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def zero(cls) -> Vec4:
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec4:
        return cls(1.0, 1.0, 1.0, 1.0)

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def magnitude(self) -> float:
        return self.length()

    def dot(self, other: Vec4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Vec4) -> Vec4:
        """Cross product of the xyz parts; w of the result is zero."""
        return Vec4(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0,
        )

    def distance(self, other: Vec4) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
            + (self.w - other.w) ** 2
        )

    def normalize(self) -> Vec4:
        """A unit-length copy; a zero vector is returned unchanged."""
        length = self.length()
        if length > 0.0:
            return self / length
        return Vec4(self.x, self.y, self.z, self.w)

    def lerp(self, other: Vec4, t: float) -> Vec4:
        return self * (1.0 - t) + other * t

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def _apply(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Vec4):
            return Vec4(
                op(self.x, other.x), op(self.y, other.y), op(self.z, other.z), op(self.w, other.w)
            )
        if _is_scalar(other):
            return Vec4(op(self.x, other), op(self.y, other), op(self.z, other), op(self.w, other))
        return NotImplemented

    def _apply_in_place(self, other: object, op: Callable[[float, float], float], scalar: bool):
        if isinstance(other, Vec4):
            self.x = op(self.x, other.x)
            self.y = op(self.y, other.y)
            self.z = op(self.z, other.z)
            self.w = op(self.w, other.w)
            return self
        if scalar and _is_scalar(other):
            self.x = op(self.x, other)
            self.y = op(self.y, other)
            self.z = op(self.z, other)
            self.w = op(self.w, other)
            return self
        return NotImplemented

    def __add__(self, other):
        return self._apply(other, lambda a, b: a + b)

    def __iadd__(self, other):
        # In-place addition leaves w untouched.
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

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

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def _partial_cmp(self, other: Vec4) -> Optional[int]:
        # Ordering looks at x and y only; equality looks at every component.
        if self.x > other.x and self.y > other.y:
            return 1
        if self.x < other.x and self.y < other.y:
            return -1
        if self == other:
            return 0
        return None

    def __lt__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return self._partial_cmp(other) == -1

    def __gt__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return self._partial_cmp(other) == 1

    def __le__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return self._partial_cmp(other) in (-1, 0)

    def __ge__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return self._partial_cmp(other) in (1, 0)