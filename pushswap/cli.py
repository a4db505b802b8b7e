"""Command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, check_duplicates, parse_int, split_arguments
from .sorting import sort
from .stacks import Operation, Stacks


def push_swap(args: Sequence[str]) -> list[Operation]:
    """Parse ``args`` as integers and return the operations that sort them.

    Raises :class:`InputError` for a malformed, out-of-range or repeated value.
    """
    values = [parse_int(word) for word in args]
    check_duplicates(values)
    return sort(Stacks(values))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` on bad input."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0
    try:
        operations = push_swap(split_arguments(argv))
    except InputError:
        print("Error")
        return 1
    for op in operations:
        print(op)
    return 0


if __name__ == "__main__":
    sys.exit(main())