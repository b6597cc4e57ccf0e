"""Demo command showing the search over numbers, strings and records."""

from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from sorted_search.config import NOT_FOUND
from sorted_search.search import (
    SearchEngine,
    compare_by,
    compare_numbers,
    compare_strings,
)

console = Console()


@dataclass(frozen=True)
class Person:
    """Record used to demonstrate searching by a single field."""

    name: str
    age: int


NUMBERS = [1, 3, 5, 7, 9, 11, 13, 15]
WORDS = ["apple", "banana", "orange", "pear", "zebra"]
PEOPLE = [
    Person("Alice", 25),
    Person("Bob", 30),
    Person("Charlie", 35),
    Person("David", 40),
]


def _examples() -> list[tuple[str, str, int, int]]:
    """Run each demo search and return ``(label, target, index, comparisons)``."""
    rows = []

    result = SearchEngine(compare_numbers).search(NUMBERS, 7)
    rows.append(("numbers", "7", result.index, result.comparisons))

    result = SearchEngine(compare_strings).search(WORDS, "orange")
    rows.append(("words", "'orange'", result.index, result.comparisons))

    # The target's name is irrelevant: only the age takes part in comparisons.
    by_age = compare_by(lambda person: person.age)
    result = SearchEngine(by_age).search(PEOPLE, Person("Anyone", 35))
    rows.append(("people by age", "age 35", result.index, result.comparisons))

    return rows


def demo() -> None:
    """
    Run example searches over numbers, words and people.

    Examples:

        sorted-search demo
    """
    table = Table(title="Example searches", border_style="dim")
    table.add_column("Sequence", style="cyan")
    table.add_column("Target")
    table.add_column("Index", justify="right", style="bold")
    table.add_column("Comparisons", justify="right", style="dim")

    for label, target, index, comparisons in _examples():
        shown = "not found" if index == NOT_FOUND else str(index)
        table.add_row(label, target, shown, str(comparisons))

    console.print(table)
