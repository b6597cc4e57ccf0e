"""Tests for the core data types (Ordering and SearchResult)."""

import dataclasses

import pytest

from sorted_search.config import NOT_FOUND
from sorted_search.core.types import Ordering, SearchResult


class TestOrdering:
    """Ordering members behave like -1, 0 and 1."""

    def test_values(self):
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1

    def test_sign_comparisons(self):
        """The engine checks `== 0` and `> 0`, so members must support both."""
        assert Ordering.LESS < 0
        assert Ordering.GREATER > 0
        assert Ordering.EQUAL == 0

    @pytest.mark.parametrize(
        "value, expected",
        [
            (-42, Ordering.LESS),
            (-0.5, Ordering.LESS),
            (0, Ordering.EQUAL),
            (0.0, Ordering.EQUAL),
            (7, Ordering.GREATER),
            (1e-9, Ordering.GREATER),
        ],
    )
    def test_of(self, value, expected):
        assert Ordering.of(value) is expected

    def test_of_returns_member(self):
        assert isinstance(Ordering.of(3), Ordering)


class TestSearchResult:
    """SearchResult describes a finished search."""

    def test_found(self):
        result = SearchResult(index=3, comparisons=2, size=8)
        assert result.found is True

    def test_found_at_zero(self):
        """Index 0 is a valid hit."""
        assert SearchResult(index=0, comparisons=1, size=1).found is True

    def test_not_found(self):
        result = SearchResult(index=NOT_FOUND, comparisons=3, size=5)
        assert result.found is False

    def test_frozen(self):
        result = SearchResult(index=1, comparisons=1, size=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.index = 2

    def test_equality(self):
        assert SearchResult(1, 2, 3) == SearchResult(index=1, comparisons=2, size=3)
