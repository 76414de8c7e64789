"""Low-level helpers for reading values out of scene description lines."""

from __future__ import annotations

WHITESPACE = " \t\n\v\f\r"
FLOAT_TOLERANCE = 0.00001
MAX_INT_DIGITS = 10


class SceneParseError(ValueError):
    """Raised when a scene description cannot be parsed."""


def _is_space(char: str) -> bool:
    return char in WHITESPACE


def skip_space(text: str) -> str:
    """Return ``text`` without its leading whitespace."""
    return text.lstrip(WHITESPACE)


def find_value_end(text: str) -> int:
    """Index of the first whitespace or comma in ``text`` (its length if none)."""
    for index, char in enumerate(text):
        if _is_space(char) or char == ",":
            return index
    return len(text)


def go_next_value(text: str) -> str:
    """Skip the current value and at most one comma directly after it."""
    if not text:
        return text
    text = skip_space(text)
    text = text[find_value_end(text):]
    if text.startswith(","):
        text = text[1:]
    return text


def _split_sign(text: str) -> tuple[int, str]:
    if text.startswith("-"):
        return -1, text[1:]
    if text.startswith("+"):
        return 1, text[1:]
    return 1, text


def _leading_digits(text: str) -> str:
    end = 0
    for char in text:
        if not char.isdigit() or not char.isascii():
            break
        end += 1
    return text[:end]


def parse_float(text: str) -> float:
    """Read a decimal number such as ``-12.5``; stops at the first other character."""
    sign, rest = _split_sign(skip_space(text))
    integer_digits = _leading_digits(rest)
    rest = rest[len(integer_digits):]
    if rest.startswith("."):
        rest = rest[1:]
    fraction_digits = _leading_digits(rest)
    integer_part = float(int(integer_digits)) if integer_digits else 0.0
    fraction_part = float(int(fraction_digits)) if fraction_digits else 0.0
    divisor = 10 ** len(fraction_digits)
    return sign * (integer_part + fraction_part / divisor)


def is_int(text: str | None) -> bool:
    """True for an optionally signed run of 1 to 10 decimal digits."""
    if text is None:
        return False
    _, digits = _split_sign(skip_space(text))
    if not all(char.isascii() and char.isdigit() for char in digits):
        return False
    return 0 < len(digits) <= MAX_INT_DIGITS


def is_float(text: str | None) -> bool:
    """True for an optionally signed decimal with at most one point preceded by a digit."""
    if not text:
        return False
    _, body = _split_sign(skip_space(text))
    digit_count = 0
    point_count = 0
    for char in body:
        if char.isascii() and char.isdigit():
            digit_count += 1
        elif char == ".":
            point_count += 1
            if point_count > 1 or digit_count == 0:
                return False
        else:
            return False
    return True


def in_int_range(value: int, low: int, high: int) -> bool:
    """True when ``low <= value <= high``."""
    return low <= value <= high


def in_float_range(value: float, low: float, high: float) -> bool:
    """True when ``value`` lies in ``[low, high]`` within a small tolerance."""
    return value + FLOAT_TOLERANCE >= low and value - FLOAT_TOLERANCE <= high


def is_end_of_line(text: str) -> bool:
    """True when nothing but whitespace is left in ``text``."""
    return not skip_space(text)