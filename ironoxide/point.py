"""Plain 2D point and 4x4 matrix records."""

from __future__ import annotations

from dataclasses import dataclass

from .vec4 import Vec4


@dataclass(order=True)
class Point:
    """A 2D point ordered lexicographically by (x, y)."""

    x: float
    y: float


@dataclass
class Matrix4:
    """A 4x4 matrix stored as four Vec4 rows."""

    x: Vec4
    y: Vec4
    z: Vec4
    w: Vec4