"""
Shared test helper utilities for sorted-search tests.

Plain classes and functions (not pytest fixtures) that can be imported
directly by test modules. Kept separate from conftest.py because
conftest.py is for fixtures only.
"""

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Person:
    """A record searched by one of its fields."""

    name: str
    age: int


class CountingComparator:
    """
    Wraps a comparator and records every invocation.

    Lets tests assert on how many comparisons a search made and on
    which elements were probed.
    """

    def __init__(self, compare: Callable[[Any, Any], int]) -> None:
        self._compare = compare
        self.calls: list[tuple[Any, Any]] = []

    def __call__(self, a: Any, b: Any) -> int:
        self.calls.append((a, b))
        return self._compare(a, b)

    @property
    def count(self) -> int:
        return len(self.calls)


def subtract(a: Any, b: Any) -> Any:
    """Comparator in the ``a - b`` style, returning arbitrary magnitudes."""
    return a - b
