"""Line-at-a-time reading from raw file descriptors."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 42
MAX_FD = 1024

_NEWLINE = b"\n"


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is pulled from the descriptor in chunks of *buffer_size* bytes and
    kept until a full line is available. Each line keeps its trailing
    newline; the last line of the input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"fd must be an int, got {type(fd).__name__}")
        if fd < 0:
            raise ValueError(f"fd must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = bytearray()
        self._scanned = 0

    def _fill(self) -> None:
        """Read until the stash holds a newline or the input is exhausted."""
        while self._stash.find(_NEWLINE, self._scanned) < 0:
            self._scanned = len(self._stash)
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._stash.clear()
                self._scanned = 0
                raise
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._stash:
            return None
        index = self._stash.find(_NEWLINE)
        end = len(self._stash) if index < 0 else index + 1
        line = bytes(self._stash[:end])
        del self._stash[:end]
        self._scanned = 0
        return line

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from *fd*, keeping separate state per descriptor.

    Returns None at the end of the input, which also forgets the state kept
    for *fd*. A read error forgets the state too and is raised.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an int, got {type(fd).__name__}")
    if fd < 0 or fd >= MAX_FD:
        raise ValueError(f"fd must be in range 0..{MAX_FD - 1}, got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line