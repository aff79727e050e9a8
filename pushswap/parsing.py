"""Reading the command-line arguments into a list of integers."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer, allowing leading whitespace only."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits_end = len(rest) - len(rest.lstrip("0123456789"))
    digits, tail = rest[:digits_end], rest[digits_end:]
    if not digits:
        raise InputError(f"not a number: {text!r}")
    number = 0
    for ch in digits:
        number = number * 10 + (ord(ch) - ord("0"))
        if not INT_MIN <= number * sign <= INT_MAX:
            raise InputError(f"out of range: {text!r}")
    if tail:
        raise InputError(f"trailing characters in: {text!r}")
    return number * sign


def split_words(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def check_duplicates(values: Iterable[int]) -> None:
    """Raise InputError if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)


def parse_args(args: Iterable[str]) -> list[int]:
    """Turn the arguments (program name excluded) into the initial stack.

    Each argument may hold several space-separated numbers; an argument
    with none is an error, as is any duplicate.
    """
    values: list[int] = []
    for arg in args:
        words = split_words(arg, " ")
        if not words:
            raise InputError("empty argument")
        values.extend(parse_int(word) for word in words)
    check_duplicates(values)
    return values