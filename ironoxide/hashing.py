"""Integer hash for cheap pseudo-random numbers."""

_MASK = 0xFFFFFFFF
_XOR = 2747636419
_MUL = 2654435769


def hash_u32(seed: int) -> int:
    """Hash a 32-bit unsigned integer; the seed wraps to 32 bits."""
    seed &= _MASK
    seed ^= _XOR
    seed = (seed * _MUL) & _MASK
    seed ^= seed >> 16
    seed = (seed * _MUL) & _MASK
    seed ^= seed >> 16
    seed = (seed * _MUL) & _MASK
    return seed