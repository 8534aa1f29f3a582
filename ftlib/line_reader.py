"""Read a file descriptor one line at a time."""

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 100
_MAX_FD = 1024


class LineReader:
    """Return successive lines read from a file descriptor.

    Each line keeps its trailing newline; the final line may lack one.
    Bytes are read ``buffer_size`` at a time and decoded as UTF-8.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"fd must be an integer, got {type(fd).__name__}")
        if not 0 <= fd < _MAX_FD:
            raise ValueError(f"fd must be in 0..{_MAX_FD - 1}, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line