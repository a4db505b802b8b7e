"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_LEADING_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def parse_int(text: str) -> int:
    """Parse one argument as a 32-bit signed integer.

    Leading whitespace and one sign are allowed; everything after them
    must be a decimal digit. A bare sign reads as zero.
    """
    body = text.lstrip(_LEADING_SPACE)
    negative = body.startswith("-")
    if body[:1] in ("+", "-"):
        body = body[1:]
    if any(ch not in _DIGITS for ch in body):
        raise InputError(f"not an integer: {text!r}")
    number = int(body) if body else 0
    value = -number if negative else number
    if not _INT_MIN <= value <= _INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def split_arguments(argv: Sequence[str]) -> list[str]:
    """A single argument is split on spaces; several are taken as they are."""
    if len(argv) == 1:
        return [word for word in argv[0].split(" ") if word]
    return list(argv)


def is_sorted(values: Sequence[int], descending: bool = False) -> bool:
    """True when ``values`` are in ascending (or descending) order."""
    pairs = zip(values, values[1:])
    if descending:
        return all(x >= y for x, y in pairs)
    return all(x <= y for x, y in pairs)


def check_duplicates(values: Iterable[int]) -> None:
    """Raise :class:`InputError` if any value appears twice."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)


def parse_arguments(argv: Sequence[str]) -> list[int]:
    """Turn the program's arguments into a list of distinct integers."""
    values = [parse_int(word) for word in split_arguments(argv)]
    check_duplicates(values)
    return values