"""Strict parsing of the integer command-line arguments."""

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def parse_int(text):
    """Parse ``text`` as a 32-bit signed integer.

    Leading whitespace and a single sign are accepted. Anything after the
    digits is rejected. An empty digit run reads as zero.

    Raises ValueError when the text holds other characters or the value
    does not fit in a 32-bit signed integer.
    """
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"out of integer range: {text!r}")
    return value