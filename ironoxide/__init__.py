"""Vector primitives, an integer hash, a toy byte scrambler and UI layout building blocks."""

__version__ = "0.1.0"