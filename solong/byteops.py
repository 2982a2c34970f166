"""Operations on mutable byte buffers (bytearray or writable memoryview)."""

from __future__ import annotations

from typing import Optional

CALLOC_LIMIT = 65536


def _require(buf, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf, value: int, length: int):
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``value``."""
    _require(buf, length, "buffer")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf, length: int):
    """Zero the first ``length`` bytes of ``buf``."""
    return memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes, refusing more than 64 KiB."""
    total = count * size
    if total > CALLOC_LIMIT:
        raise MemoryError(f"refusing to allocate {total} bytes (limit {CALLOC_LIMIT})")
    if total < 0:
        raise ValueError("negative allocation size")
    return bytearray(total)


def memchr(buf, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes, or None."""
    _require(buf, n, "buffer")
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Difference of the first differing byte among the first ``n``; 0 if they match."""
    _require(a, n, "first buffer")
    _require(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dst`` and return ``dst``."""
    if dst is None and src is None:
        return None
    _require(dst, n, "destination")
    _require(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dst``; overlapping views are handled."""
    if dst is None and src is None:
        return None
    _require(dst, n, "destination")
    _require(src, n, "source")
    # Snapshot the source first so overlapping views copy correctly.
    dst[:n] = bytes(src[:n])
    return dst