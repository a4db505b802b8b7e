"""Command that checks whether a list of operations sorts its arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .stacks import Operation, Stacks


class InstructionError(ValueError):
    """Raised for a line that is not an instruction followed by a newline."""


def execute(stacks: Stacks, instruction: str) -> None:
    """Perform one instruction line, which must end with a newline."""
    if not instruction.endswith("\n"):
        raise InstructionError(f"unterminated instruction: {instruction!r}")
    name = instruction[:-1]
    try:
        op = Operation(name)
    except ValueError:
        raise InstructionError(f"unknown instruction: {name!r}") from None
    stacks.apply(op)


def run(stacks: Stacks, lines: Iterable[str]) -> bool:
    """Execute every line and report whether the stacks end up solved."""
    for line in lines:
        execute(stacks, line)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``K0``.

    Once the instructions have been read, the exit status is 1 whatever the
    verdict, as it is for every error.
    """
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0
    try:
        stacks = Stacks(parse_arguments(argv))
        solved = run(stacks, sys.stdin)
    except (InputError, InstructionError):
        print("Error")
        return 1
    print("OK" if solved else "K0")
    return 1


if __name__ == "__main__":
    sys.exit(main())