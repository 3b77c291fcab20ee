"""The SDBM string hash."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def sdbm(data: str | bytes | bytearray | memoryview) -> int:
    """Return the 32-bit SDBM hash of ``data``.

    Text is hashed as its UTF-8 encoding.
    """
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(f"sdbm expects text or bytes, got {type(data).__name__}")
    value = 0
    for byte in raw:
        value = (byte + (value << 6) + (value << 16) - value) & _MASK
    return value