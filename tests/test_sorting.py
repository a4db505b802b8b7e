import itertools
import random

import pytest

from pushswap.stacks import Operation, Stacks
from pushswap.sorting import (
    median,
    quicksort_a,
    quicksort_b,
    sort,
    sort_small_a,
    sort_three_a,
    sort_three_b,
)


def _replay(values, operations):
    stacks = Stacks(values)
    for op in operations:
        assert stacks.apply(op)
    return stacks


def test_median_count_of_smaller_elements():
    rng = random.Random(7)
    for size in range(1, 30):
        values = rng.sample(range(-500, 500), size)
        m = median(values)
        assert m in values
        assert sum(1 for v in values if v < m) == size // 2


def test_median_pinned():
    assert median([5, 1, 3]) == 3
    assert median([7]) == 7


def test_median_empty_raises():
    with pytest.raises(ValueError):
        median([])


def test_sort_already_sorted_records_nothing():
    stacks = Stacks([1, 2, 3, 4, 5])
    assert sort(stacks) == []
    assert stacks.a == [1, 2, 3, 4, 5]


def test_sort_two():
    stacks = Stacks([2, 1])
    assert sort(stacks) == [Operation.SWAP_A]
    assert stacks.a == [1, 2]


def test_sort_three_descending():
    stacks = Stacks([3, 2, 1])
    sort_three_a(stacks)
    assert stacks.operations == [Operation.SWAP_A, Operation.REVERSE_ROTATE_A]
    assert stacks.a == [1, 2, 3]


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_permutations(perm):
    stacks = Stacks(list(perm))
    sort_three_a(stacks)
    assert stacks.a == [1, 2, 3]
    assert len(stacks.operations) <= 2


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_sort_small_a_leaves_rest(perm):
    stacks = Stacks(list(perm) + [10, 20])
    sort_small_a(stacks, 3)
    assert stacks.a == [1, 2, 3, 10, 20]
    assert stacks.b == []


def test_sort_small_a_two():
    stacks = Stacks([5, 4, 9])
    sort_small_a(stacks, 2)
    assert stacks.a == [4, 5, 9]


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_sort_three_b_all_permutations(perm):
    stacks = Stacks([10, 20], list(perm))
    sort_three_b(stacks, 3)
    assert stacks.a == [1, 2, 3, 10, 20]
    assert stacks.b == []


@pytest.mark.parametrize("perm", [(1, 2), (2, 1)])
def test_sort_three_b_two(perm):
    stacks = Stacks([10], list(perm))
    sort_three_b(stacks, 2)
    assert stacks.a == [1, 2, 10]
    assert stacks.b == []


def test_sort_three_b_one():
    stacks = Stacks([10], [4, 8])
    sort_three_b(stacks, 1)
    assert stacks.a == [4, 10]
    assert stacks.b == [8]


def test_quicksort_b_descending_chunk_is_pushed():
    stacks = Stacks([10], [5, 4, 3, 2, 1])
    assert quicksort_b(stacks, 5, 0)
    assert stacks.a == [1, 2, 3, 4, 5, 10]
    assert stacks.operations == [Operation.PUSH_A] * 5


def test_quicksort_a_sorts_whole_stack():
    rng = random.Random(3)
    values = rng.sample(range(1000), 40)
    stacks = Stacks(values)
    assert quicksort_a(stacks, len(values), 0)
    assert stacks.a == sorted(values)
    assert stacks.b == []


@pytest.mark.parametrize("size", list(range(1, 13)) + [20, 50, 100])
def test_sort_random_and_replay(size):
    rng = random.Random(size)
    for _ in range(5):
        values = rng.sample(range(-200, 200), size)
        stacks = Stacks(values)
        ops = sort(stacks)
        assert stacks.is_solved()
        assert stacks.a == sorted(values)
        replayed = _replay(values, ops)
        assert replayed.is_solved()


@pytest.mark.parametrize("perm", list(itertools.permutations([0, -1, 2, 5, -3])))
def test_sort_all_permutations_of_five(perm):
    stacks = Stacks(list(perm))
    sort(stacks)
    assert stacks.a == sorted(perm)
    assert stacks.b == []


def test_sort_returns_recorded_operations():
    stacks = Stacks([4, 3, 2, 1, 0, 9, 8])
    ops = sort(stacks)
    assert ops is stacks.operations
    assert _replay([4, 3, 2, 1, 0, 9, 8], ops).a == [0, 1, 2, 3, 4, 8, 9]