"""Typer application root for the sorted-search CLI."""

import logging

import typer
from rich.console import Console

from sorted_search import __version__
from sorted_search.cli.demo import demo
from sorted_search.cli.search import search
from sorted_search.core.logging import set_level

console = Console()

app = typer.Typer(
    name="sorted-search",
    help="Binary search over sorted values with a chosen comparator.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"sorted-search {__version__}")
        raise typer.Exit()


def _verbose_callback(value: bool) -> None:
    """Enable DEBUG-level logging when --verbose is passed."""
    if value:
        set_level(logging.DEBUG)


@app.callback()
def main(
    _version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    _verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable detailed debug output.",
        callback=_verbose_callback,
        is_eager=True,
    ),
) -> None:
    """Binary search over sorted values with a chosen comparator."""


app.command(name="search")(search)
app.command(name="demo")(demo)
