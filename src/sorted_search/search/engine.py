"""
Interval-halving search over sorted sequences.

The search only ever reads ``sequence[mid]`` and asks the comparator how
that element orders against the target, so it works for any element type
and any total order the caller can express as a three-way comparison.

Precondition: the sequence must be sorted according to ``compare``. It is
not checked (that would cost linear time). Violating it gives an
undefined result, never an exception. ``is_sorted`` is available for
callers that want to validate untrusted input first.

Usage:
    from sorted_search.search import binary_search, compare_numbers

    index = binary_search([1, 3, 5, 7], 5, compare_numbers)  # 2
"""

from collections.abc import Sequence
from typing import Any, Optional, TypeVar

from sorted_search.config import NOT_FOUND, get_settings
from sorted_search.core import Comparator, SearchResult, get_logger
from sorted_search.search.comparators import get_comparator

T = TypeVar("T")

logger = get_logger(__name__)


def _search(
    sequence: Sequence[T],
    target: T,
    compare: Comparator[T],
) -> tuple[int, int]:
    """Run the search and return ``(index, comparator invocations)``."""
    low = 0
    high = len(sequence) - 1
    comparisons = 0

    while low <= high:
        # Floor division biases mid toward low on even-sized ranges.
        mid = low + (high - low) // 2
        order = compare(sequence[mid], target)
        comparisons += 1

        if order == 0:
            return mid, comparisons
        if order > 0:
            high = mid - 1
        else:
            low = mid + 1

    return NOT_FOUND, comparisons


def binary_search(
    sequence: Sequence[T],
    target: T,
    compare: Comparator[T],
) -> int:
    """
    Locate ``target`` in a sorted sequence.

    Makes at most ``ceil(log2(len(sequence) + 1))`` comparator calls.
    When several elements are order-equivalent to the target, the index
    of whichever one the halving lands on first is returned; it is not
    necessarily the first or last of them.

    Args:
        sequence: Sorted, randomly indexable sequence. May be empty.
        target: Value to locate.
        compare: Three-way comparator, called as ``compare(element, target)``.

    Returns:
        Index of an element order-equivalent to ``target``, or
        ``NOT_FOUND`` (-1) if there is none.

    Example:
        >>> binary_search([-10, -5, 0, 2, 5], -5, compare_numbers)
        1
    """
    index, _ = _search(sequence, target, compare)
    return index


def find(
    sequence: Sequence[T],
    target: T,
    compare: Comparator[T],
) -> Optional[int]:
    """Like ``binary_search`` but returns None instead of NOT_FOUND."""
    index, _ = _search(sequence, target, compare)
    return None if index == NOT_FOUND else index


def contains(
    sequence: Sequence[T],
    target: T,
    compare: Comparator[T],
) -> bool:
    """Return whether some element is order-equivalent to ``target``."""
    index, _ = _search(sequence, target, compare)
    return index != NOT_FOUND


def is_sorted(sequence: Sequence[T], compare: Comparator[T]) -> bool:
    """
    Check that ``sequence`` is in non-decreasing order under ``compare``.

    Linear time. Never called by the search functions themselves.
    """
    return all(
        compare(sequence[i], sequence[i + 1]) <= 0
        for i in range(len(sequence) - 1)
    )


class SearchEngine:
    """
    Facade binding a comparator to repeated searches.

    The comparator defaults to the one named by ``SEARCH_COMPARATOR``
    in settings. Each search returns a ``SearchResult`` with the number
    of comparisons made, which the CLI reports.

    Example:
        >>> engine = SearchEngine(compare_strings)
        >>> engine.search(["apple", "banana", "cherry"], "cherry").index
        2
    """

    def __init__(self, compare: Optional[Comparator] = None) -> None:
        """
        Initialise the engine.

        Args:
            compare: Comparator to use. If None, the comparator named in
                     settings is looked up.

        Raises:
            ConfigurationError: If the configured comparator name is unknown.
        """
        if compare is None:
            name = get_settings().search.comparator
            compare = get_comparator(name)
            logger.debug("SearchEngine using configured comparator '%s'", name)
        self._compare = compare

    @property
    def compare(self) -> Comparator:
        """The comparator this engine searches with."""
        return self._compare

    def search(self, sequence: Sequence[Any], target: Any) -> SearchResult:
        """
        Search ``sequence`` for ``target``.

        Args:
            sequence: Sorted sequence (under this engine's comparator).
            target: Value to locate.

        Returns:
            ``SearchResult`` with the index (or NOT_FOUND) and the
            comparison count.
        """
        index, comparisons = _search(sequence, target, self._compare)

        if index == NOT_FOUND:
            logger.debug(
                "%r not found in %d values (%d comparisons)",
                target,
                len(sequence),
                comparisons,
            )
        else:
            logger.debug(
                "%r found at index %d of %d (%d comparisons)",
                target,
                index,
                len(sequence),
                comparisons,
            )

        return SearchResult(index=index, comparisons=comparisons, size=len(sequence))
