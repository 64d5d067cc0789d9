"""Truncated copying from a source stream to a binary output stream.

Utilities for taking the leading part of a source:
- head_lines: First N lines
- head_bytes: First N bytes

Bytes are decoded as UTF-8 with invalid sequences replaced and written back
out as UTF-8, independent of the locale's stdout encoding.
"""

import codecs
from typing import BinaryIO

from ..models.errors import OutputError
from ..sources import SourceStream

ENCODING = "utf-8"
READ_CHUNK = 64 * 1024


def decode(data: bytes) -> str:
    """Decode bytes read from a source, replacing invalid UTF-8."""
    return data.decode(ENCODING, errors="replace")


def write_output(output_stream: BinaryIO, text: str) -> None:
    """Write ``text`` to the output as UTF-8, raising OutputError on failure.

    Undecodable bytes carried in names from the command line (surrogate
    escapes) are written back as the original bytes.
    """
    if not text:
        return
    try:
        output_stream.write(text.encode(ENCODING, errors="surrogateescape"))
    except OSError as e:
        raise OutputError(e) from e


def head_lines(input_stream: SourceStream, n: int, output_stream: BinaryIO) -> int:
    """Output first N lines from input stream to output stream.

    Each line keeps its trailing newline when the source has one and is
    written as soon as it is read. Stops early at end of source.

    Args:
        input_stream: Source to read from
        n: Number of lines to output
        output_stream: Output stream to write to

    Returns:
        Number of lines written
    """
    count = 0
    while count < n:
        line = input_stream.readline()
        if not line:
            break
        write_output(output_stream, decode(line))
        count += 1
    return count


def head_bytes(input_stream: SourceStream, n: int, output_stream: BinaryIO) -> int:
    """Output first N bytes from input stream to output stream.

    Reads at most READ_CHUNK bytes at a time until N bytes or end of source,
    so the count may be far larger than the source. A multi-byte character
    split across chunks is decoded whole; one split by the N-byte cutoff is
    replaced.

    Returns:
        Number of bytes read from the source
    """
    decoder = codecs.getincrementaldecoder(ENCODING)(errors="replace")
    total = 0
    while total < n:
        chunk = input_stream.read(min(n - total, READ_CHUNK))
        if not chunk:
            break
        total += len(chunk)
        write_output(output_stream, decoder.decode(chunk))
    write_output(output_stream, decoder.decode(b"", final=True))
    return total


def flush_output(output_stream: BinaryIO) -> None:
    """Flush the output so content precedes any diagnostic that follows."""
    try:
        output_stream.flush()
    except OSError as e:
        raise OutputError(e) from e
