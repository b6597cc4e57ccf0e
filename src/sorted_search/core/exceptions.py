"""
Custom exception hierarchy for sorted-search.

A search that finds nothing is a normal outcome and never raises. These
exceptions only cover the edges of the package: configuration and input
supplied through the CLI.

Exception hierarchy:
    SortedSearchError (base)
    ├── ConfigurationError: Unknown comparator or invalid settings
    └── InputError: Values that cannot be coerced or are not sorted
"""

from typing import Optional


class SortedSearchError(Exception):
    """
    Base exception for all sorted-search errors.

    Args:
        message: Human-readable error description.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message} — {self.details}"
        return self.message


class ConfigurationError(SortedSearchError):
    """
    Raised when configuration is invalid.

    Examples:
        - Unknown comparator name in SEARCH_COMPARATOR
        - Unknown comparator name passed to ``--compare``
    """

    pass


class InputError(SortedSearchError):
    """
    Raised when values supplied on the command line are unusable.

    Examples:
        - "abc" given where the numeric comparator expects numbers
        - Values not sorted under the chosen comparator
    """

    pass
