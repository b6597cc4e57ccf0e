"""Search module: interval-halving search and comparators.

This module provides:
    - binary_search / find / contains: The search itself
    - is_sorted: Linear check of the sortedness precondition
    - SearchEngine: Facade binding a comparator to repeated searches
    - Comparators for numbers, strings and keyed records

Usage:
    from sorted_search.search import binary_search, compare_numbers

    index = binary_search([1, 3, 5, 7, 9], 7, compare_numbers)
"""

from sorted_search.search.comparators import (
    compare_by,
    compare_casefold,
    compare_numbers,
    compare_strings,
    get_comparator,
    reverse,
)
from sorted_search.search.engine import (
    SearchEngine,
    binary_search,
    contains,
    find,
    is_sorted,
)

__all__ = [
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
    "get_comparator",
]
