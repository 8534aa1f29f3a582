"""Byte-buffer operations on mutable ``bytearray`` objects.

The string helpers here treat a buffer as holding a NUL-terminated string:
its length is the number of bytes before the first zero byte, or the whole
buffer if there is none.
"""

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_length(length: int, available: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"{what} must not be negative, got {length}")
    if length > available:
        raise ValueError(f"{what} {length} exceeds the available {available} bytes")


def _c_string(data: Bytes) -> bytes:
    """Return the bytes of ``data`` up to, not including, the first NUL."""
    return bytes(data).split(b"\0", 1)[0]


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_length(length, len(buffer), "length")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: Bytes, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` over the start of ``dest``."""
    _check_length(length, len(dest), "length")
    _check_length(length, len(src), "length")
    dest[:length] = bytes(src[:length])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, len(buffer) - dest, "length")
    _check_length(length, len(buffer) - src, "length")
    buffer[dest:dest + length] = buffer[src:src + length]
    return buffer


def memchr(data: Bytes, value: int, size: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` (modulo 256)
    among the first ``size`` bytes of ``data``, or ``None``."""
    _check_length(size, len(data), "size")
    index = bytes(data[:size]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, size: int) -> int:
    """Compare the first ``size`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(size, len(first), "size")
    _check_length(size, len(second), "size")
    for a, b in zip(bytes(first[:size]), bytes(second[:size])):
        if a != b:
            return a - b
    return 0


def strlcpy(dest: bytearray, src: Bytes, size: int) -> int:
    """Copy the string in ``src`` into ``dest``, writing at most ``size`` bytes
    including the terminating NUL.

    Returns the length of the source string, so truncation happened when the
    result is ``size`` or more.
    """
    _check_length(size, len(dest), "size")
    text = _c_string(src)
    if size == 0:
        return len(text)
    copied = min(len(text), size - 1)
    dest[:copied] = text[:copied]
    dest[copied] = 0
    return len(text)


def strlcat(dest: bytearray, src: Bytes, size: int) -> int:
    """Append the string in ``src`` to the string in ``dest`` so that the
    result, NUL included, fits in ``size`` bytes.

    Returns the length the full concatenation would have; when ``size`` is
    not larger than the current string in ``dest``, nothing is written and
    the result is ``len(src) + size``.
    """
    _check_length(size, len(dest), "size")
    dest_length = len(_c_string(dest))
    text = _c_string(src)
    if size <= dest_length:
        return len(text) + size
    copied = min(len(text), size - 1 - dest_length)
    dest[dest_length:dest_length + copied] = text[:copied]
    dest[dest_length + copied] = 0
    return dest_length + len(text)