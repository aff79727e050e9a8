"""Replacing values by their rank."""

from __future__ import annotations

from collections.abc import Iterable


def normalize(values: Iterable[int]) -> list[int]:
    """Return each value's index in the sorted order, keeping positions.

    Equal values share the rank of their first occurrence in sorted order.
    """
    items = list(values)
    ranks: dict[int, int] = {}
    for rank, value in enumerate(sorted(items)):
        ranks.setdefault(value, rank)
    return [ranks[value] for value in items]