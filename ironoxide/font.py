"""Bitmap font glyph table."""

from __future__ import annotations

import os
import struct

_TABLE_BYTES = 2048
_EMBEDDED_BYTES = 768
_FIRST_PRINTABLE = 32


class Font:
    """A table of 1024 little-endian u16 words, four per glyph from code 32 on."""

    __slots__ = ("_data",)

    def __init__(self, raw: bytes = b"") -> None:
        if len(raw) > _TABLE_BYTES:
            raise ValueError(f"font table holds at most {_TABLE_BYTES} bytes")
        self._data = struct.unpack(f"<{_TABLE_BYTES // 2}H", raw.ljust(_TABLE_BYTES, b"\0"))

    @classmethod
    def parse(cls, path: str | os.PathLike) -> Font:
        """Load the glyph table from the start of a file."""
        with open(path, "rb") as handle:
            return cls(handle.read(_TABLE_BYTES))

    @classmethod
    def from_bytes(cls, data: bytes) -> Font:
        """Load an embedded glyph table of exactly 768 bytes."""
        if len(data) != _EMBEDDED_BYTES:
            raise ValueError(f"embedded font data must be {_EMBEDDED_BYTES} bytes")
        return cls(bytes(data))

    def get_data(self, char: int | str) -> tuple[int, int, int, int]:
        """Return (u, v, width, extra) for a character code."""
        if isinstance(char, str):
            if len(char) != 1:
                raise ValueError("expected a single character")
            code = ord(char) & 0xFF
        else:
            code = int(char)
            if not 0 <= code <= 0xFF:
                raise ValueError("character code must fit in a byte")
        if code < _FIRST_PRINTABLE:
            raise ValueError("control characters have no glyph")
        start = (code - _FIRST_PRINTABLE) * 4
        a, b, c, d = self._data[start : start + 4]
        return (a, b, c, d)

    def __repr__(self) -> str:
        return "Font()"