"""Reading lines from file descriptors in fixed-size chunks.

A reader keeps what it has read past the end of the current line for each
descriptor separately, so several descriptors can be read in turn.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Iterator, Optional

BUFFER_SIZE = 3
MAX_FD = 1024


class LineReader:
    """Returns one line at a time, newline included, from any number of sources.

    A source is either an integer file descriptor or an object with a
    ``read(size)`` method returning bytes.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._stash: Dict[Any, bytes] = {}

    def _read(self, fd: Any) -> bytes:
        if isinstance(fd, int):
            return os.read(fd, self.buffer_size)
        return fd.read(self.buffer_size)

    @staticmethod
    def _check(fd: Any) -> None:
        if isinstance(fd, bool):
            raise TypeError("a file descriptor cannot be a bool")
        if isinstance(fd, int):
            if not 0 <= fd <= MAX_FD:
                raise ValueError(f"file descriptor {fd} is out of range")
        elif not callable(getattr(fd, "read", None)):
            raise TypeError("expected a file descriptor or an object with read()")

    def next_line(self, fd: Any) -> Optional[bytes]:
        """The next line from fd, or None once it is exhausted."""
        self._check(fd)
        stash = self._stash.pop(fd, b"")
        try:
            while b"\n" not in stash:
                chunk = self._read(fd)
                if not chunk:
                    break
                stash += chunk
        except BaseException:
            # Whatever was buffered for this source is discarded on error.
            raise
        if not stash:
            return None
        line, newline, rest = stash.partition(b"\n")
        if rest:
            self._stash[fd] = rest
        return line + newline

    def lines(self, fd: Any) -> Iterator[bytes]:
        """Yield every remaining line from fd."""
        while True:
            line = self.next_line(fd)
            if line is None:
                return
            yield line


_default_reader = LineReader()


def get_next_line(fd: Any) -> Optional[bytes]:
    """The next line from fd using a shared reader with the default buffer size."""
    return _default_reader.next_line(fd)