"""
Tests for the custom exception hierarchy.

The exception classes carry structured data (message + details) and
custom formatting. We verify:
    - Base class message formatting (with and without details)
    - The em-dash separator in _format_message()
    - Inheritance chain (all exceptions are SortedSearchError)
"""

import pytest

from sorted_search.core.exceptions import (
    ConfigurationError,
    InputError,
    SortedSearchError,
)


class TestBaseException:
    """SortedSearchError is the root of the hierarchy."""

    def test_message_only(self):
        exc = SortedSearchError("Something went wrong")
        assert exc.message == "Something went wrong"
        assert exc.details is None
        assert str(exc) == "Something went wrong"

    def test_message_with_details(self):
        exc = SortedSearchError("Failed", details="Not a number")
        assert exc.message == "Failed"
        assert exc.details == "Not a number"
        assert str(exc) == "Failed — Not a number"

    def test_format_message_em_dash(self):
        """The separator is an em-dash (—), not a hyphen (-)."""
        exc = SortedSearchError("A", details="B")
        assert " — " in str(exc)

    def test_is_exception(self):
        with pytest.raises(Exception):
            raise SortedSearchError("test")


class TestSubclassInheritance:
    """All domain exceptions must inherit from SortedSearchError."""

    @pytest.mark.parametrize("exc_class", [ConfigurationError, InputError])
    def test_inherits_from_base(self, exc_class):
        assert issubclass(exc_class, SortedSearchError)

    @pytest.mark.parametrize("exc_class", [ConfigurationError, InputError])
    def test_subclass_preserves_message_and_details(self, exc_class):
        exc = exc_class("msg", details="dtl")
        assert exc.message == "msg"
        assert exc.details == "dtl"
        assert str(exc) == "msg — dtl"

    def test_catchable_as_base(self):
        """The CLI catches SortedSearchError, so subclasses must be caught too."""
        with pytest.raises(SortedSearchError):
            raise InputError("Values are not sorted")
