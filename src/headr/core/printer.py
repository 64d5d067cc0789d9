"""Per-source driver: open, print a header, copy the leading part.

Sources are processed one at a time in the configured order. A source that
fails to open or read becomes a diagnostic on the error stream and an Error
result; the remaining sources are still processed. Failures writing to the
output stream are not caught here.
"""

from typing import BinaryIO, List, Optional, TextIO

import click

from ..models.config import HeadConfig
from ..models.errors import Completed, Error, SourceError, SourceResult, describe_cause
from ..sources import open_source
from .streaming import flush_output, head_bytes, head_lines, write_output


def format_header(name: str, index: int) -> str:
    """Header line for the source at ``index``.

    Every header but the first is preceded by a blank line.
    """
    prefix = "\n" if index > 0 else ""
    return f"{prefix}==> {name} <==\n"


def process_source(
    name: str,
    index: int,
    config: HeadConfig,
    out: BinaryIO,
    stdin: Optional[BinaryIO] = None,
) -> SourceResult:
    """Copy the leading part of one source to ``out``.

    Returns:
        Completed on success, Error if the source could not be opened or read

    Raises:
        OutputError: If writing to ``out`` fails
    """
    try:
        with open_source(name, stdin=stdin) as stream:
            if config.multiple_sources:
                write_output(out, format_header(name, index))

            if config.mode == "bytes":
                count = head_bytes(stream, config.byte_count, out)
            else:
                count = head_lines(stream, config.line_count, out)
    except SourceError as e:
        return Error(source=name, message=describe_cause(e.cause))

    return Completed(source=name, mode=config.mode, count=count)


def print_heads(
    config: HeadConfig,
    out: BinaryIO,
    err: TextIO,
    stdin: Optional[BinaryIO] = None,
) -> List[SourceResult]:
    """Print the leading part of every configured source.

    Args:
        config: Validated configuration
        out: Binary stream receiving headers and content (UTF-8)
        err: Stream receiving one ``<source>: <cause>`` line per failed source
        stdin: Byte stream used for the ``-`` source (default: process stdin)

    Returns:
        One result per source, in source order

    Raises:
        OutputError: If writing to ``out`` fails; aborts the whole run
    """
    results: List[SourceResult] = []
    for index, name in enumerate(config.files):
        result = process_source(name, index, config, out, stdin=stdin)
        if isinstance(result, Error):
            flush_output(out)
            click.echo(str(result), file=err)
        results.append(result)
    return results
