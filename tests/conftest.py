"""
Shared pytest fixtures for sorted-search tests.

This module provides reusable sorted sequences used across both unit
and integration tests:

    - numbers: Sorted integers including negatives and zero
    - words: Sorted lowercase words
    - people: Person records sorted by both age and name
    - isolated_settings: Settings singleton reset around a test
"""

import pytest

import sorted_search.config.settings as settings_module
from tests.helpers import Person


# ---------------------------------------------------------------------------
# Sorted sequences
# ---------------------------------------------------------------------------


@pytest.fixture
def numbers() -> list[int]:
    """Nine sorted integers spanning negative, zero and positive values."""
    return [-10, -5, 0, 2, 5, 10, 15, 20, 25]


@pytest.fixture
def words() -> list[str]:
    """Five sorted lowercase words."""
    return ["apple", "banana", "cherry", "date", "elderberry"]


@pytest.fixture
def people() -> list[Person]:
    """
    People sorted by age and, coincidentally, by name as well.

    Having both orders agree lets the same list be searched with either
    a by-age or a by-name comparator.
    """
    return [
        Person("Alice", 25),
        Person("Bob", 30),
        Person("Charlie", 35),
        Person("David", 40),
        Person("Eve", 45),
    ]


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_settings():
    """
    Reset the settings singleton before and after the test.

    Tests that monkeypatch SEARCH_* or DISPLAY_* variables use this so
    the next get_settings() call reads the patched environment, and so
    later tests do not inherit it.
    """
    settings_module._settings_instance = None
    yield
    settings_module._settings_instance = None
