"""Conversion between digit sequences and arbitrary-precision integer values."""

import logging
import re
from collections.abc import Iterable

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"[0-9]+")

_DIGIT_CHARS = "0123456789ABCDEF"


def digits_from_value(value: int, base: int) -> list[int]:
    """
    Express value in base, most-significant digit first.

    Zero yields ``[0]``. Negative values are clamped to zero.
    """
    if value <= 0:
        return [0]
    reversed_digits: list[int] = []
    while value > 0:
        value, remainder = divmod(value, base)
        reversed_digits.append(remainder)
    reversed_digits.reverse()
    return reversed_digits


def value_from_digits(digits: Iterable[int], base: int) -> int:
    """Fold most-significant-first digits into an integer."""
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


def is_digit_value(digit: object) -> bool:
    """Return True for an int that is not a bool."""
    return isinstance(digit, int) and not isinstance(digit, bool)


def value_from_foreign_digits(digits: Iterable[object], base: int) -> int:
    """
    Fold digits from an arbitrary caller-supplied iterable.

    Any missing, non-integer or out-of-base digit degrades the whole
    result to zero instead of raising.
    """
    value = 0
    for digit in digits:
        if not is_digit_value(digit) or not 0 <= digit < base:  # type: ignore[operator]
            logger.debug("Digit %r does not fit base %d, treating operand as 0", digit, base)
            return 0
        value = value * base + digit
    return value


def parse_decimal(text: object) -> int | None:
    """
    Validate a non-negative decimal string.

    Surrounding whitespace is ignored. Returns None for anything that is not
    a string holding a plain run of ASCII digits, including signed input
    such as ``"-5"``.
    """
    if not isinstance(text, str):
        return None
    trimmed = text.strip()
    if not _DECIMAL_RE.fullmatch(trimmed):
        return None
    # int() refuses very long strings, folding has no length limit
    return value_from_digits((ord(char) - ord("0") for char in trimmed), 10)


def digit_to_char(digit: int) -> str:
    """Render a single digit, using A-F above nine."""
    return _DIGIT_CHARS[digit]


def format_digits(digits: Iterable[int]) -> str:
    """Render a digit sequence as text."""
    return "".join(digit_to_char(digit) for digit in digits)
