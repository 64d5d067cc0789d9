"""Error kinds and per-source result models."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel


class HeadError(Exception):
    """Base class for headr errors."""

    pass


class ConfigError(HeadError):
    """Command-line configuration could not be turned into a HeadConfig."""

    pass


class InvalidCount(ConfigError):
    """A numeric flag value is not a strictly positive integer.

    ``token`` is the offending text exactly as supplied. When ``kind`` is set
    ("line" or "byte") the message names the flag it came from.
    """

    def __init__(self, token: str, kind: Optional[str] = None):
        self.token = token
        self.kind = kind
        if kind:
            message = f"illegal {kind} count -- {token}"
        else:
            message = token
        super().__init__(message)


class ConflictingFlags(ConfigError):
    """Both --lines and --bytes were given."""

    def __init__(self, message: str = "--lines and --bytes cannot be used together"):
        super().__init__(message)


def describe_cause(cause: BaseException) -> str:
    """Return the human part of an OS error (``No such file or directory``)."""
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    return str(cause)


class SourceError(HeadError):
    """A single source failed; recoverable at the per-source boundary."""

    def __init__(self, source: str, cause: BaseException):
        self.source = source
        self.cause = cause
        super().__init__(f"{source}: {describe_cause(cause)}")


class OpenError(SourceError):
    """Source could not be opened."""

    pass


class ReadError(SourceError):
    """Source was opened but reading from it failed."""

    pass


class OutputError(HeadError):
    """Writing to standard output failed. Always fatal."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"write error: {describe_cause(cause)}")


class Completed(BaseModel):
    """A source that was copied to the output."""

    status: Literal["completed"] = "completed"
    source: str
    mode: Literal["lines", "bytes"]
    count: int


class Error(BaseModel):
    """A source that was reported as a diagnostic instead of copied."""

    status: Literal["error"] = "error"
    source: str
    message: str

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


SourceResult = Union[Completed, Error]


__all__ = [
    "Completed",
    "ConfigError",
    "ConflictingFlags",
    "Error",
    "HeadError",
    "InvalidCount",
    "OpenError",
    "OutputError",
    "ReadError",
    "SourceError",
    "SourceResult",
    "describe_cause",
]
