"""A simple reversible byte obfuscation with a small header."""

HEADER = bytes([54, 12, 74, 124, 74, 91, 0, 80])
_KEY_MASK = 0b01011101100010110
_PREFIX_LEN = len(HEADER) + 2


def _swap_nibbles(byte: int) -> int:
    return ((byte >> 4) | (byte << 4)) & 0xFF


def _key_byte(key: int, index: int) -> int:
    # The key shifted by 0 or 8 bits, truncated to its low byte.
    return ((key << (index % 2 * 8)) & 0xFFFF) & 0xFF


def encrypt(data: bytes, key: int) -> bytes:
    """Encrypt data with a 16-bit key; the key is stored masked after the header."""
    if not 0 <= key <= 0xFFFF:
        raise ValueError("key must fit in 16 bits")
    if len(data) < 1:
        raise ValueError("nothing to encrypt")
    stored_key = (key ^ _KEY_MASK) & 0xFFFF
    body = bytes(
        _swap_nibbles(byte) ^ _key_byte(key, index) for index, byte in enumerate(data)
    )
    return HEADER + stored_key.to_bytes(2, "little") + body


def decrypt(data: bytes) -> bytes:
    """Decrypt data produced by encrypt."""
    if len(data) <= _PREFIX_LEN:
        raise ValueError("data too short to decrypt")
    if data[: len(HEADER)] != HEADER:
        raise ValueError("data does not start with the expected header")
    key = (int.from_bytes(data[8:10], "little") ^ _KEY_MASK) & 0xFFFF
    return bytes(
        _swap_nibbles(byte ^ _key_byte(key, index))
        for index, byte in enumerate(data)
        if index >= _PREFIX_LEN
    )