"""Run configuration built from command-line input."""

from __future__ import annotations

from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from ..counts import parse_positive_int
from .errors import ConflictingFlags, InvalidCount

STDIN_NAME = "-"
DEFAULT_LINES = 10


class HeadConfig(BaseModel):
    """What to print: which sources, and how much of each."""

    model_config = ConfigDict(frozen=True)

    files: List[str] = Field(default_factory=lambda: [STDIN_NAME], min_length=1)
    line_count: PositiveInt = DEFAULT_LINES
    byte_count: Optional[PositiveInt] = None

    @field_validator("files")
    @classmethod
    def names_not_empty(cls, v: List[str]) -> List[str]:
        """Source names must be non-empty strings."""

        if any(not name for name in v):
            raise ValueError("Source names cannot be empty")
        return v

    @property
    def mode(self) -> Literal["lines", "bytes"]:
        """Byte mode wins whenever a byte count is present."""

        return "bytes" if self.byte_count is not None else "lines"

    @property
    def multiple_sources(self) -> bool:
        return len(self.files) > 1


def _parse_count(token: str, kind: str) -> int:
    try:
        return parse_positive_int(token)
    except InvalidCount as e:
        raise InvalidCount(e.token, kind=kind) from e


def build_config(
    files: Sequence[str] = (),
    lines: Optional[str] = None,
    bytes_: Optional[str] = None,
) -> HeadConfig:
    """Validate raw flag values and build a HeadConfig.

    Args:
        files: Source names in the order given (empty means stdin)
        lines: Raw ``--lines`` value, or None when omitted
        bytes_: Raw ``--bytes`` value, or None when omitted

    Returns:
        Validated HeadConfig

    Raises:
        ConflictingFlags: If both ``lines`` and ``bytes_`` were supplied
        InvalidCount: If either value is not a positive integer
    """
    if lines is not None and bytes_ is not None:
        raise ConflictingFlags()

    byte_count = _parse_count(bytes_, "byte") if bytes_ is not None else None
    line_count = (
        _parse_count(lines, "line") if lines is not None else DEFAULT_LINES
    )

    return HeadConfig(
        files=list(files) or [STDIN_NAME],
        line_count=line_count,
        byte_count=byte_count,
    )
