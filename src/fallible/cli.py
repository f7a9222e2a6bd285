# src/fallible/cli.py
"""
fallible Command Line Interface (CLI).

This module exposes the worked examples on the terminal using `typer` and `rich`.
Each command prints the container value it got back (``Some``/``Nothing``,
``Ok``/``Err``) so the propagation rules are visible.

Exit codes
----------
- 0: the command produced a value (``Nothing`` from ``divide`` included).
- 1: the command produced an ``Err``.
- 2: usage error (Typer's own validation).

A :class:`~fallible.core.panic.Panic` is never caught here: ``--no-remorse``
on a zero divisor, or ``meaning`` without ``--recover`` on a document lacking
the field, crash the process with a traceback.

Usage
-----
    $ fallible divide 8 3
    $ fallible divide -7 2
    $ fallible divide 4 0 --no-remorse
    $ fallible parse '{"a": [1, 2]}'
    $ fallible meaning '{"meaningOfLife": 42}'
    $ fallible meaning --file doc.json --recover
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from fallible.chapters import (
    divide_safely,
    divide_with_no_remorse,
    get_meaning_of_life,
    parse_input_to_json_value,
    try_get_meaning_of_life,
)
from fallible.core.result import Result

# Ensure env vars (like LOG_LEVEL) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help="fallible: Option and Result values, demonstrated on the terminal.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _report(result: Result[Any, Any], title: str) -> None:
    """Print an ``Ok`` in green or an ``Err`` in red and exit 1."""
    if result.is_success():
        value = escape(json.dumps(result.unwrap()))
        console.print(Panel(f"[bold green]Ok[/bold green]({value})", title=title))
        return
    console.print(f"[bold red]Err:[/bold red] {escape(str(result.unwrap_err()))}")
    raise typer.Exit(code=1)


def _read_input(text: str | None, file: Path | None) -> str:
    """Return the document from exactly one of ``text`` / ``file``."""
    if file is not None and text is None:
        return file.read_text(encoding="utf-8")
    if text is not None and file is None:
        return text
    raise typer.BadParameter("pass either TEXT or --file, not both or neither")


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


# Negative operands such as `-7` must not be parsed as options.
@app.command(context_settings={"ignore_unknown_options": True})  # type: ignore[misc]
def divide(
    a: Annotated[int, typer.Argument(help="Dividend.")],
    b: Annotated[int, typer.Argument(help="Divisor; zero gives `Nothing`.")],
    no_remorse: Annotated[
        bool,
        typer.Option(
            "--no-remorse",
            help="Unwrap the quotient; a zero divisor panics instead of printing `Nothing`.",
        ),
    ] = False,
) -> None:
    """Divide two integers, truncating toward zero."""
    if no_remorse:
        console.print(divide_with_no_remorse(a, b))
        return
    console.print(repr(divide_safely(a, b)))


@app.command()  # type: ignore[misc]
def parse(
    text: Annotated[str, typer.Argument(help="JSON text to parse.")],
) -> None:
    """Parse TEXT as JSON and print the decoded value."""
    _report(parse_input_to_json_value(text), title="parse")


@app.command()  # type: ignore[misc]
def meaning(
    text: Annotated[
        str | None,
        typer.Argument(help="JSON document holding a `meaningOfLife` integer."),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Read the JSON document from a file instead.",
        ),
    ] = None,
    recover: Annotated[
        bool,
        typer.Option(
            "--recover/--no-recover",
            help="Report a missing or non-integer field as an error instead of panicking.",
        ),
    ] = False,
) -> None:
    """Extract the `meaningOfLife` field from a JSON document."""
    document = _read_input(text, file)
    if recover:
        _report(try_get_meaning_of_life(document), title="meaning")
    else:
        _report(get_meaning_of_life(document), title="meaning")


if __name__ == "__main__":
    app()
