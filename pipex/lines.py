"""Line-at-a-time reading from a file descriptor."""

from __future__ import annotations

import os
from typing import Iterator

BUFFER_SIZE = 42


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline; a final line without one is
    returned as is. Reads happen in chunks of ``buffer_size`` bytes.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._storage = b""
        self._eof = False

    def _fill(self) -> None:
        while not self._eof and b"\n" not in self._storage:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                self._eof = True
            else:
                self._storage += chunk

    def next_line(self) -> str | None:
        """Return the next line, or ``None`` once the input is exhausted."""
        self._fill()
        if not self._storage:
            return None
        end = self._storage.find(b"\n")
        if end < 0:
            line, self._storage = self._storage, b""
        else:
            line, self._storage = self._storage[: end + 1], self._storage[end + 1 :]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd, buffer_size)