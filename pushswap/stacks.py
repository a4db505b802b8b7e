"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Operation(str, Enum):
    """An instruction, named by the text that spells it."""

    SWAP_A = "sa"
    SWAP_B = "sb"
    SWAP_BOTH = "ss"
    PUSH_A = "pa"
    PUSH_B = "pb"
    ROTATE_A = "ra"
    ROTATE_B = "rb"
    ROTATE_BOTH = "rr"
    REVERSE_ROTATE_A = "rra"
    REVERSE_ROTATE_B = "rrb"
    REVERSE_ROTATE_BOTH = "rrr"

    def __str__(self) -> str:
        return self.value


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, each with its top at index 0.

    Every operation that changes the stacks is appended to ``operations``.
    An operation that cannot take effect leaves the stacks alone and is
    not recorded.
    """

    a: list[int]
    b: list[int] = field(default_factory=list)
    operations: list[Operation] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)

    def _record(self, op: Operation) -> bool:
        self.operations.append(op)
        return True

    def apply(self, op: Operation | str) -> bool:
        """Perform ``op``; return whether it changed the stacks."""
        actions = {
            Operation.SWAP_A: self.swap_a,
            Operation.SWAP_B: self.swap_b,
            Operation.SWAP_BOTH: self.swap_both,
            Operation.PUSH_A: self.push_a,
            Operation.PUSH_B: self.push_b,
            Operation.ROTATE_A: self.rotate_a,
            Operation.ROTATE_B: self.rotate_b,
            Operation.ROTATE_BOTH: self.rotate_both,
            Operation.REVERSE_ROTATE_A: self.reverse_rotate_a,
            Operation.REVERSE_ROTATE_B: self.reverse_rotate_b,
            Operation.REVERSE_ROTATE_BOTH: self.reverse_rotate_both,
        }
        return actions[Operation(op)]()

    # Push

    def push_a(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return False
        self.a.insert(0, self.b.pop(0))
        return self._record(Operation.PUSH_A)

    def push_b(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return False
        self.b.insert(0, self.a.pop(0))
        return self._record(Operation.PUSH_B)

    # Swap

    @staticmethod
    def _swap(stack: list[int]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def swap_a(self) -> bool:
        """Exchange the two top elements of ``a``."""
        if len(self.a) < 2:
            return False
        self._swap(self.a)
        return self._record(Operation.SWAP_A)

    def swap_b(self) -> bool:
        """Exchange the two top elements of ``b``."""
        if len(self.b) < 2:
            return False
        self._swap(self.b)
        return self._record(Operation.SWAP_B)

    def swap_both(self) -> bool:
        """Swap both stacks; does nothing unless each holds two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self._swap(self.a)
        self._swap(self.b)
        return self._record(Operation.SWAP_BOTH)

    # Rotate

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        stack.append(stack.pop(0))

    def rotate_a(self) -> bool:
        """Move the top of ``a`` to its bottom."""
        if len(self.a) < 2:
            return False
        self._rotate(self.a)
        return self._record(Operation.ROTATE_A)

    def rotate_b(self) -> bool:
        """Move the top of ``b`` to its bottom."""
        if len(self.b) < 2:
            return False
        self._rotate(self.b)
        return self._record(Operation.ROTATE_B)

    def rotate_both(self) -> bool:
        """Rotate both stacks; does nothing unless each holds two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self._rotate(self.a)
        self._rotate(self.b)
        return self._record(Operation.ROTATE_BOTH)

    # Reverse rotate

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        stack.insert(0, stack.pop())

    def reverse_rotate_a(self) -> bool:
        """Move the bottom of ``a`` to its top."""
        if len(self.a) < 2:
            return False
        self._reverse_rotate(self.a)
        return self._record(Operation.REVERSE_ROTATE_A)

    def reverse_rotate_b(self) -> bool:
        """Move the bottom of ``b`` to its top."""
        if len(self.b) < 2:
            return False
        self._reverse_rotate(self.b)
        return self._record(Operation.REVERSE_ROTATE_B)

    def reverse_rotate_both(self) -> bool:
        """Reverse-rotate both stacks; needs two or more in each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        return self._record(Operation.REVERSE_ROTATE_BOTH)

    def is_solved(self) -> bool:
        """True when ``a`` is in ascending order and ``b`` is empty."""
        return not self.b and all(x <= y for x, y in zip(self.a, self.a[1:]))