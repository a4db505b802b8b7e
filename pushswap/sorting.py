"""Sorting stack ``a`` with the eleven operations, quicksort style."""

from __future__ import annotations

from collections.abc import Sequence

from .parsing import is_sorted
from .stacks import Operation, Stacks


def median(values: Sequence[int]) -> int:
    """The element at index ``len(values) // 2`` once ``values`` are sorted."""
    if not values:
        raise ValueError("median of an empty sequence")
    return sorted(values)[len(values) // 2]


def sort_three_a(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three elements in place."""
    a = stacks.a
    if a[0] > a[1] and a[0] < a[2] and a[1] < a[2]:
        stacks.swap_a()
    if a[0] > a[1] and a[0] > a[2] and a[1] > a[2]:
        stacks.swap_a()
        stacks.reverse_rotate_a()
    if a[0] > a[1] and a[0] > a[2] and a[1] < a[2]:
        stacks.rotate_a()
    if a[0] < a[1] and a[0] < a[2] and a[1] > a[2]:
        stacks.swap_a()
        stacks.rotate_a()
    if a[0] < a[1] and a[0] > a[2] and a[1] > a[2]:
        stacks.reverse_rotate_a()


def _push(stacks: Stacks, length: int, to_a: bool) -> int:
    if to_a:
        stacks.push_a()
    else:
        stacks.push_b()
    return length - 1


def sort_small_a(stacks: Stacks, length: int) -> None:
    """Sort the top two or three elements of ``a``, leaving the rest alone."""
    a = stacks.a
    if length == 3 and len(a) == 3:
        sort_three_a(stacks)
    elif length == 2:
        if a[0] > a[1]:
            stacks.swap_a()
    elif length == 3:
        while length != 3 or not (a[0] < a[1] < a[2]):
            if length == 3 and a[0] > a[1] and a[2] != 0:
                stacks.swap_a()
            elif length == 3 and not (a[2] > a[0] and a[2] > a[1]):
                length = _push(stacks, length, to_a=False)
            elif a[0] > a[1]:
                stacks.swap_a()
            else:
                previous = length
                length += 1
                if previous:
                    stacks.push_a()


def sort_three_b(stacks: Stacks, length: int) -> None:
    """Move the top ``length`` (up to three) elements of ``b`` onto ``a`` in order."""
    a, b = stacks.a, stacks.b
    if length == 1:
        stacks.push_a()
    elif length == 2:
        if b[0] < b[1]:
            stacks.swap_b()
        for _ in range(length):
            stacks.push_a()
    elif length == 3:
        while length or not (a[0] < a[1] < a[2]):
            if length == 1 and a[0] > a[1]:
                stacks.swap_a()
            elif (
                length == 1
                or (length >= 2 and b[0] > b[1])
                or (length == 3 and b[0] > b[2])
            ):
                length = _push(stacks, length, to_a=True)
            else:
                stacks.swap_b()


def quicksort_a(stacks: Stacks, length: int, rotations: int) -> bool:
    """Sort the top ``length`` elements of ``a`` in ascending order."""
    if is_sorted(stacks.a[:length]):
        return True
    numbers = length
    if length <= 3:
        sort_small_a(stacks, length)
        return True
    pivot = median(stacks.a[:length])
    kept = numbers // 2 + numbers % 2
    while length != kept:
        if stacks.a[0] < pivot:
            length -= 1
            stacks.push_b()
        else:
            rotations += 1
            if rotations:
                stacks.rotate_a()
    while kept != len(stacks.a) and rotations:
        rotations -= 1
        stacks.reverse_rotate_a()
    return quicksort_a(stacks, kept, 0) and quicksort_b(stacks, numbers // 2, 0)


def quicksort_b(stacks: Stacks, length: int, rotations: int) -> bool:
    """Move the top ``length`` elements of ``b`` onto ``a``, sorted."""
    if is_sorted(stacks.b[:length], descending=True):
        for _ in range(length):
            stacks.push_a()
        length = -1
    if length <= 3:
        sort_three_b(stacks, length)
        return True
    numbers = length
    pivot = median(stacks.b[:length])
    while length != numbers // 2:
        if stacks.b[0] >= pivot:
            length -= 1
            stacks.push_a()
        else:
            rotations += 1
            if rotations:
                stacks.rotate_b()
    while numbers // 2 != len(stacks.b) and rotations:
        rotations -= 1
        stacks.reverse_rotate_b()
    return quicksort_a(stacks, numbers // 2 + numbers % 2, 0) and quicksort_b(
        stacks, numbers // 2, 0
    )


def sort(stacks: Stacks) -> list[Operation]:
    """Sort ``a`` and return the operations recorded on ``stacks``."""
    if not is_sorted(stacks.a):
        size = len(stacks.a)
        if size == 2:
            stacks.swap_a()
        elif size == 3:
            sort_three_a(stacks)
        else:
            quicksort_a(stacks, size, 0)
    return stacks.operations