"""sorted-search: comparator-driven binary search over sorted sequences.

This package locates a target inside an already-sorted sequence in
logarithmic time, using a caller-supplied three-way comparison function.

Usage:
    from sorted_search import binary_search, compare_numbers, NOT_FOUND

    index = binary_search([1, 3, 5, 7, 9], 7, compare_numbers)
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sorted-search")
except PackageNotFoundError:
    __version__ = "0.0.0"

from sorted_search.config.constants import NOT_FOUND
from sorted_search.core import (
    Comparator,
    Ordering,
    SearchResult,
    SortedSearchError,
)
from sorted_search.search import (
    SearchEngine,
    binary_search,
    compare_by,
    compare_casefold,
    compare_numbers,
    compare_strings,
    contains,
    find,
    is_sorted,
    reverse,
)

__all__ = [
    "__version__",
    "NOT_FOUND",
    # Search
    "binary_search",
    "find",
    "contains",
    "is_sorted",
    "SearchEngine",
    # Comparators
    "compare_numbers",
    "compare_strings",
    "compare_casefold",
    "compare_by",
    "reverse",
    # Core types
    "Comparator",
    "Ordering",
    "SearchResult",
    # Base exception
    "SortedSearchError",
]
