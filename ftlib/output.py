"""Write characters, strings and numbers straight to a file descriptor."""

import os
from typing import Optional, Union

from .strings import itoa


def _check_fd(fd: int) -> int:
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an integer, got {type(fd).__name__}")
    if fd < 0:
        raise ValueError(f"fd must not be negative, got {fd}")
    return fd


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of ``data`` to ``fd`` and return how many were written."""
    _check_fd(fd)
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char(c: Union[str, int], fd: int) -> int:
    """Write one character to ``fd``.

    ``c`` is a one-character string, written UTF-8 encoded, or a byte value
    0-255. Returns the number of bytes written.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got a string of length {len(c)}")
        data = c.encode()
    elif isinstance(c, int) and not isinstance(c, bool):
        if not 0 <= c <= 255:
            raise ValueError(f"byte value out of range: {c}")
        data = bytes([c])
    else:
        raise TypeError(f"expected a character or a byte value, got {type(c).__name__}")
    return _write_all(fd, data)


def put_str(s: Optional[str], fd: int) -> int:
    """Write ``s`` to ``fd``; nothing is written when ``s`` is None or ``fd`` is 0.

    Returns the number of bytes written.
    """
    _check_fd(fd)
    if s is None or fd == 0:
        return 0
    return _write_all(fd, s.encode())


def put_endl(s: Optional[str], fd: int) -> int:
    """Write ``s`` followed by a newline to ``fd``.

    Nothing is written when ``s`` is None or ``fd`` is 0. Returns the number
    of bytes written.
    """
    _check_fd(fd)
    if s is None or fd == 0:
        return 0
    return _write_all(fd, (s + "\n").encode())


def put_nbr(n: int, fd: int) -> int:
    """Write the decimal form of a signed 32-bit integer to ``fd``.

    Returns the number of bytes written.
    """
    return _write_all(fd, itoa(n).encode())