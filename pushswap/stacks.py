"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of the operations applied.

    An operation that cannot act, such as swapping a stack with fewer than
    two elements, changes nothing and is not logged.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.ops: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log(self, name: str) -> None:
        self.ops.append(name)

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)
        return True

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        if self._swap(self.a):
            self._log("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        if self._swap(self.b):
            self._log("sb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1):
            self._log("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1):
            self._log("rb")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1):
            self._log("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1):
            self._log("rrb")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self._push(self.b, self.a):
            self._log("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self._push(self.a, self.b):
            self._log("pb")


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values are in non-decreasing order."""
    items = list(values)
    return all(x <= y for x, y in zip(items, items[1:]))