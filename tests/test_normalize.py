import pytest

from pushswap.normalize import normalize


def test_worked_example():
    assert normalize([30, -5, 10]) == [2, 0, 1]


def test_empty():
    assert normalize([]) == []


@pytest.mark.parametrize(
    "values",
    [
        [5],
        [3, 1, 2],
        [100, -100, 0, 2147483647, -2147483648],
        [9, 8, 7, 6, 5, 4, 3, 2, 1],
    ],
)
def test_ranks_are_a_permutation_preserving_order(values):
    result = normalize(values)
    assert sorted(result) == list(range(len(values)))
    for i, x in enumerate(values):
        for j, y in enumerate(values):
            assert (x < y) == (result[i] < result[j])


def test_already_ranked_is_unchanged():
    values = [2, 0, 3, 1]
    assert normalize(values) == values


def test_idempotent():
    once = normalize([40, 10, 30, 20])
    assert normalize(once) == once


def test_duplicates_share_first_rank():
    result = normalize([5, 5, 1])
    assert result[0] == result[1]
    assert result[2] == 0