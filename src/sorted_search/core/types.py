"""Core data types for sorted-search.

This module defines the small vocabulary shared by the engine, the
comparators and the CLI:
    - Ordering: Three-way comparison outcome
    - Comparator: Callable protocol for three-way comparison functions
    - SearchResult: Outcome of a search through the SearchEngine facade

Design notes:
    - Ordering is an IntEnum so comparators may return either an Ordering
      member or a plain negative/zero/positive number; the engine only
      ever checks the sign.
    - SearchResult is frozen, it describes a finished call.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, TypeVar

from sorted_search.config.constants import NOT_FOUND

T_contra = TypeVar("T_contra", contravariant=True)


class Ordering(IntEnum):
    """Outcome of a three-way comparison.

    Values:
        LESS: The first argument sorts before the second
        EQUAL: Both arguments are order-equivalent
        GREATER: The first argument sorts after the second
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: float) -> "Ordering":
        """Normalise a negative/zero/positive number to an Ordering.

        Example:
            >>> Ordering.of(-42)
            <Ordering.LESS: -1>
        """
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


class Comparator(Protocol[T_contra]):
    """A three-way comparison function.

    ``compare(a, b)`` returns a negative number if ``a`` sorts before ``b``,
    zero if they are order-equivalent and a positive number otherwise.
    Order-equivalent does not mean identical: comparing records by a
    single field treats records with the same field value as equal.
    """

    def __call__(self, a: T_contra, b: T_contra, /) -> int: ...


@dataclass(frozen=True)
class SearchResult:
    """Result of a search run through ``SearchEngine``.

    Attributes:
        index: Index of an order-equivalent element, or NOT_FOUND (-1)
        comparisons: Number of comparator invocations the search made
        size: Length of the searched sequence
    """

    index: int
    comparisons: int
    size: int

    @property
    def found(self) -> bool:
        """Whether the target was located."""
        return self.index != NOT_FOUND
