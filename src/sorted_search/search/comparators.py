"""
Ready-made three-way comparators.

Every comparator returns a negative number, zero or a positive number
(see ``Ordering``). Sign-based comparison ``(a > b) - (a < b)`` is used
instead of subtraction so that large integers, floats and any other
mutually ordered values work without overflow or rounding surprises.

Usage:
    from sorted_search.search import compare_by, compare_numbers

    by_age = compare_by(lambda person: person.age)
"""

from typing import Any, Callable, TypeVar

from sorted_search.config.constants import parse_comparator_name
from sorted_search.core import Comparator, ConfigurationError

T = TypeVar("T")
K = TypeVar("K")


def compare_numbers(a: Any, b: Any) -> int:
    """Three-way comparison of numbers (or any values supporting ``<``)."""
    return (a > b) - (a < b)


def compare_strings(a: str, b: str) -> int:
    """Case-sensitive comparison by code point, so "Apple" != "apple"."""
    return (a > b) - (a < b)


def compare_casefold(a: str, b: str) -> int:
    """Case-insensitive string comparison."""
    return compare_strings(a.casefold(), b.casefold())


def compare_by(
    key: Callable[[T], K],
    compare: Callable[[K, K], int] = compare_numbers,
) -> Callable[[T, T], int]:
    """
    Build a comparator that orders records by one of their fields.

    Two records with the same key are order-equivalent even if they differ
    elsewhere, which is what lets a search find "the person aged 35" using
    a target that only has a meaningful age.

    Args:
        key: Extracts the sort key from a record.
        compare: Comparator applied to the extracted keys.

    Returns:
        A comparator over records.

    Example:
        >>> by_name = compare_by(lambda p: p.name, compare_strings)
    """

    def _compare(a: T, b: T) -> int:
        return compare(key(a), key(b))

    return _compare


def reverse(compare: Callable[[T, T], int]) -> Callable[[T, T], int]:
    """Return a comparator for sequences sorted in descending order."""

    def _compare(a: T, b: T) -> int:
        return compare(b, a)

    return _compare


_COMPARATORS: dict[str, Comparator[Any]] = {
    "numeric": compare_numbers,
    "string": compare_strings,
    "casefold": compare_casefold,
}


def get_comparator(name: str) -> Comparator[Any]:
    """
    Look up a named comparator.

    Args:
        name: One of ``SUPPORTED_COMPARATORS`` (case-insensitive).

    Returns:
        The comparator function.

    Raises:
        ConfigurationError: If the name is unknown.
    """
    try:
        normalised = parse_comparator_name(name)
    except ValueError as e:
        raise ConfigurationError("Unknown comparator", details=str(e)) from e
    return _COMPARATORS[normalised]
