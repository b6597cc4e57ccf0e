"""Core module: types, exceptions, and logging.

This module provides the foundational components used throughout the package:
    - Data types (Ordering, Comparator, SearchResult)
    - Exception hierarchy (SortedSearchError and subclasses)
    - Logging utilities (get_logger, configure_logging, set_level)

Usage:
    from sorted_search.core import (
        Ordering,
        SearchResult,
        ConfigurationError,
        get_logger,
    )
"""

from sorted_search.core.exceptions import (
    ConfigurationError,
    InputError,
    SortedSearchError,
)
from sorted_search.core.logging import (
    configure_logging,
    get_logger,
    set_level,
)
from sorted_search.core.types import (
    Comparator,
    Ordering,
    SearchResult,
)

__all__ = [
    # Types
    "Comparator",
    "Ordering",
    "SearchResult",
    # Exceptions
    "SortedSearchError",
    "ConfigurationError",
    "InputError",
    # Logging
    "get_logger",
    "configure_logging",
    "set_level",
]
