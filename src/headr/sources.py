"""Source opening: turn a source name into a readable byte stream.

The name ``-`` binds to the process's standard input; any other name is a
filesystem path. Both variants expose the same small reading surface
(``readline`` and ``read``) and translate OS failures into ReadError tagged
with the source name.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Optional

from .models.config import STDIN_NAME
from .models.errors import OpenError, ReadError


@dataclass
class SourceStream:
    """Buffered byte stream for one source, owned by a single processing step."""

    name: str
    raw: BinaryIO
    closed: bool = field(default=False, init=False)

    def readline(self) -> bytes:
        """Return the next line including its newline, or b"" at end of source."""
        try:
            return self.raw.readline()
        except OSError as e:
            raise ReadError(self.name, e) from e

    def read(self, size: int) -> bytes:
        """Return up to ``size`` bytes; fewer only at end of source."""
        try:
            return self.raw.read(size)
        except OSError as e:
            raise ReadError(self.name, e) from e

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self._release()

    def _release(self) -> None:
        self.raw.close()

    def __enter__(self) -> "SourceStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileStream(SourceStream):
    """Stream over a file opened by path."""

    pass


class StdinStream(SourceStream):
    """Stream over standard input. Closing it leaves stdin open."""

    def _release(self) -> None:
        pass


def open_source(name: str, stdin: Optional[BinaryIO] = None) -> SourceStream:
    """Open ``name`` for reading.

    Args:
        name: Source name; ``-`` means standard input
        stdin: Byte stream to use for ``-`` (default: the process's stdin)

    Returns:
        StdinStream or FileStream, ready to read

    Raises:
        OpenError: If the file cannot be opened (never raised for ``-``)
    """
    if name == STDIN_NAME:
        return StdinStream(name, stdin or sys.stdin.buffer)

    try:
        handle = open(name, "rb")
    except OSError as e:
        raise OpenError(name, e) from e
    return FileStream(name, handle)
