"""Strategies that sort stack ``a`` using the puzzle operations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.normalize import normalize
from pushswap.stacks import Stacks, is_sorted


def find_min_index(values: Sequence[int]) -> int:
    """Return the position of the first smallest value, or -1 if empty."""
    if not values:
        return -1
    best_index = 0
    best_value = values[0]
    for index, value in enumerate(values):
        if value < best_value:
            best_index, best_value = index, value
    return best_index


def _max_position(values: Sequence[int]) -> int:
    if not values:
        return -1
    best_index = 0
    best_value = values[0]
    for index, value in enumerate(values):
        if value > best_value:
            best_index, best_value = index, value
    return best_index


def sort_two(stacks: Stacks) -> None:
    """Sort a two-element stack ``a``."""
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a three-element stack ``a`` in at most two operations."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first > second:
        stacks.sa()
    elif first > third:
        stacks.rra()
    elif second > third:
        stacks.rra()
        stacks.sa()


def sort_five(stacks: Stacks) -> None:
    """Sort a five-element stack ``a`` by parking its two smallest on ``b``."""
    for _ in range(2):
        min_index = find_min_index(stacks.a)
        size = len(stacks.a)
        if min_index <= size // 2:
            for _ in range(min_index):
                stacks.ra()
        else:
            for _ in range(size - min_index):
                stacks.rra()
        stacks.pb()
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def _push_chunks_to_b(stacks: Stacks, chunks: int) -> None:
    chunk_size = len(stacks.a) // chunks + 1
    chunk = 0
    while stacks.a:
        if stacks.a[0] < (chunk + 1) * chunk_size:
            stacks.pb()
            if stacks.b and stacks.b[0] < chunk * chunk_size + chunk_size // 2:
                stacks.rb()
        else:
            stacks.ra()
        if len(stacks.b) >= (chunk + 1) * chunk_size:
            chunk += 1


def _push_back_to_a(stacks: Stacks) -> None:
    while stacks.b:
        pos = _max_position(stacks.b)
        size = len(stacks.b)
        if pos <= size // 2:
            for _ in range(pos):
                stacks.rb()
        else:
            for _ in range(size - pos):
                stacks.rrb()
        stacks.pa()


def chunk_sort(stacks: Stacks) -> None:
    """Sort ``a`` holding ranks 0..n-1 by chunks moved through ``b``."""
    chunks = 5 if len(stacks.a) <= 100 else 10
    _push_chunks_to_b(stacks, chunks)
    _push_back_to_a(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort the given values, top first."""
    items = list(values)
    if is_sorted(items):
        return []
    stacks = Stacks(normalize(items))
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        chunk_sort(stacks)
    return stacks.ops