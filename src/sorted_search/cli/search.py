"""Search command for looking up a value in a sorted list of values."""

import math
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from sorted_search.config import get_settings, parse_comparator_name
from sorted_search.core import InputError, SortedSearchError
from sorted_search.search import SearchEngine, get_comparator, is_sorted, reverse

console = Console()


def _coerce(raw: str, comparator_name: str) -> Any:
    """
    Convert a command-line token to the type the comparator expects.

    The numeric comparator needs numbers: integers are tried first so
    that ``3`` stays an int, then floats. Python's own number syntax
    applies, so surrounding whitespace and digit separators (``1_000``)
    are accepted. NaN is rejected: it is unordered, every comparison
    with it reports equality. String comparators take the token as is.
    """
    if comparator_name != "numeric":
        return raw
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        raise InputError(
            f"Not a number: {raw!r}",
            details="The numeric comparator only accepts numeric values.",
        ) from None
    if math.isnan(value):
        raise InputError(
            f"Not a number: {raw!r}",
            details="NaN has no position in a sorted order.",
        )
    return value


def search(
    values: Annotated[
        list[str],
        typer.Argument(
            help=(
                "Values to search, already sorted. Numeric values use Python "
                "number syntax (e.g. 1_000, 2.5e3); NaN is rejected."
            ),
        ),
    ],
    target: Annotated[
        str,
        typer.Option("--target", "-t", help="Value to look for."),
    ],
    compare: Annotated[
        Optional[str],
        typer.Option(
            "--compare",
            "-c",
            help="Comparator: numeric, string or casefold. Defaults to SEARCH_COMPARATOR.",
        ),
    ] = None,
    descending: Annotated[
        bool,
        typer.Option("--descending", "-d", help="Values are sorted in descending order."),
    ] = False,
) -> None:
    """
    Find the index of a value in a sorted list.

    Examples:

        sorted-search search 1 3 5 7 9 -t 7

        sorted-search search apple banana cherry -t cherry -c string

        sorted-search search --target=-5 -- -10 -5 0 2
    """
    settings = get_settings()
    requested = compare or settings.search.comparator

    try:
        compare_fn = get_comparator(requested)
        # get_comparator has validated the name at this point.
        name = parse_comparator_name(requested)
        if descending:
            compare_fn = reverse(compare_fn)

        sequence = [_coerce(value, name) for value in values]
        needle = _coerce(target, name)

        if not is_sorted(sequence, compare_fn):
            order = "descending" if descending else "ascending"
            raise InputError(
                "Values are not sorted",
                details=f"Expected {order} order under the '{name}' comparator.",
            )

        result = SearchEngine(compare_fn).search(sequence, needle)
    except SortedSearchError as e:
        console.print(f"[red]Search failed:[/red] {escape(e.message)}")
        if e.details:
            console.print(f"  [dim]{escape(e.details)}[/dim]")
        raise typer.Exit(code=1) from None

    if result.found:
        console.print(
            f"Found [bold]{escape(target)}[/bold] at index [bold green]{result.index}[/bold green]"
        )
    else:
        console.print(f"[yellow]{escape(target)} not found.[/yellow]")

    if settings.display.show_comparisons:
        console.print(
            f"[dim]{result.comparisons} comparison(s) over {result.size} value(s)[/dim]"
        )
