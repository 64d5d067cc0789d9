"""Configuration and result models.

``headr.models.config`` depends on ``headr.counts``, which in turn raises the
errors defined here, so only the error models are re-exported at package
level.
"""

from .errors import (
    Completed,
    ConfigError,
    ConflictingFlags,
    Error,
    HeadError,
    InvalidCount,
    OpenError,
    OutputError,
    ReadError,
    SourceError,
    SourceResult,
)

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
]
