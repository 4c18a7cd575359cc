"""Converting CSV field text to integers and booleans."""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+\Z")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_TRUE_START = frozenset("1TtYy")
_FALSE_START = frozenset("0FfNn")


def to_int(text: str) -> int:
    """Parse a 32-bit signed integer.

    Leading whitespace is allowed; anything after the digits is not.
    Raises ValueError when the text is not such an integer.
    """
    if not _INT_RE.match(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def to_bool(text: str) -> bool:
    """Interpret Yes/No, True/False or 1/0 by the first character.

    Raises ValueError when the first character is not one of these.
    """
    if not text:
        raise ValueError("empty boolean value")
    first = text[0]
    if first in _TRUE_START:
        return True
    if first in _FALSE_START:
        return False
    raise ValueError(f"not a boolean: {text!r}")