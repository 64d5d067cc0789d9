"""Parsing of positive integer counts given on the command line."""

import re

from .models.errors import InvalidCount

_DECIMAL = re.compile(r"\+?[0-9]+")


def parse_positive_int(value: str) -> int:
    """Convert ``value`` to an int greater than zero.

    Only plain base-10 digits are accepted, optionally led by ``+``. Zero,
    negatives, whitespace and anything non-numeric raise InvalidCount
    carrying ``value`` unchanged.

    Raises:
        InvalidCount: If ``value`` is not a strictly positive integer
    """
    if not isinstance(value, str) or not _DECIMAL.fullmatch(value):
        raise InvalidCount(value)

    num = int(value)
    if num <= 0:
        raise InvalidCount(value)
    return num
