"""Byte-buffer operations on bytearrays."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(buf_len: int, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > buf_len:
        raise ValueError(f"length {n} exceeds {name} of {buf_len} bytes")


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf in place."""
    _check_length(len(buf), n)
    buf[:n] = bytes(n)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of value; return buf."""
    _check_length(len(buf), n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dst; return dst."""
    _check_length(len(dst), n, "destination")
    _check_length(len(src), n, "source")
    if dst is not src:
        dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes within buf from offset src to offset dst; overlap is safe."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(len(buf) - dst, n, "destination")
    _check_length(len(buf) - src, n, "source")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to value's low byte among the first n, or None."""
    _check_length(len(data), n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch, else 0."""
    _check_length(len(a), n, "first buffer")
    _check_length(len(b), n, "second buffer")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} overflows the addressable size")
    return bytearray(count * size)