import itertools
import random

import pytest

from pushswap.stacks import Stacks
from pushswap.sorting import (
    chunk_sort,
    find_min_index,
    solve,
    sort_five,
    sort_three,
    sort_two,
)


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        getattr(stacks, op)()
    return stacks


def test_find_min_index_basic():
    assert find_min_index([3, 1, 2]) == 1


def test_find_min_index_empty():
    assert find_min_index([]) == -1


def test_find_min_index_first_of_ties():
    assert find_min_index([2, 1, 1]) == 1


def test_sort_two_swaps_when_needed():
    stacks = Stacks([1, 0])
    sort_two(stacks)
    assert list(stacks.a) == [0, 1]
    assert stacks.ops == ["sa"]


def test_sort_two_leaves_sorted():
    stacks = Stacks([0, 1])
    sort_two(stacks)
    assert stacks.ops == []


@pytest.mark.parametrize("perm", list(itertools.permutations(range(3))))
def test_sort_three_all_permutations(perm):
    stacks = Stacks(perm)
    sort_three(stacks)
    assert list(stacks.a) == [0, 1, 2]
    assert len(stacks.ops) <= 2


@pytest.mark.parametrize("perm", list(itertools.permutations(range(5))))
def test_sort_five_all_permutations(perm):
    stacks = Stacks(perm)
    sort_five(stacks)
    assert list(stacks.a) == [0, 1, 2, 3, 4]
    assert not stacks.b


@pytest.mark.parametrize("size", [4, 6, 10, 100, 101, 500])
def test_chunk_sort_sorts_ranks(size):
    values = list(range(size))
    random.Random(size).shuffle(values)
    stacks = Stacks(values)
    chunk_sort(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_solve_sorted_input_needs_nothing():
    assert solve([-5, 0, 7, 42]) == []


def test_solve_single_value():
    assert solve([9]) == []


@pytest.mark.parametrize(
    "values",
    [
        [2, 1],
        [3, 2, 1],
        [10, -4, 7, 0],
        [50, -20, 3, 8, -1],
        [5, 4, 3, 2, 1, 0, -1],
    ],
)
def test_solve_sorts_original_values(values):
    stacks = _replay(values, solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_solve_large_random():
    rng = random.Random(7)
    values = rng.sample(range(-100000, 100000), 200)
    stacks = _replay(values, solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b