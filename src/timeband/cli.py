# src/timeband/cli.py
"""
Timeband Command Line Interface (CLI).

This module implements the user-facing terminal interface using `typer` and
`rich`. Serialized entries and rendered timelines go to stdout; errors go to
stderr through a Rich console.

Commands
--------
- **parse**: Build one entry from flags and print it as JSON or YAML.
- **render**: Load a YAML timeline, filter it, and print the banded text view.

Usage
-----
    # Serialize a range entry as pretty JSON
    $ timeband parse --label "Roman Republic" --tag rome --start=-509 --end=-27 --pretty

    # Render every entry tagged "rome" from a timeline file
    $ timeband render --path history.yml --filter rome --text
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from timeband.core.contracts.entry import Entry
from timeband.core.errors import TimelineError
from timeband.core.filters import filter_entries
from timeband.core.render import RenderMode, render_entries
from timeband.core.settings import get_logger, load_settings
from timeband.core.storage import dump_entry, load_entries

# Ensure env vars (like TIMEBAND_PATH) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help="Timeband: record year-valued events and render them as an ASCII timeline.",
    rich_markup_mode="markdown",
    no_args_is_help=True,
)
err_console = Console(stderr=True)
logger = get_logger(__name__)


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _fail(title: str, error: Exception, *, verbose: bool = False) -> typer.Exit:
    """Helper: Report ``error`` on stderr and build the exit to raise."""
    err_console.print(f"[bold red]❌ {title}:[/bold red] {escape(str(error))}")
    if verbose:
        traceback.print_exception(error)
    return typer.Exit(code=1)


def _resolve_path(path: Path | None) -> Path:
    """Helper: Fall back to `TIMEBAND_PATH` when `--path` is omitted."""
    resolved = path if path is not None else load_settings().timeline_path
    if resolved is None:
        raise typer.BadParameter(
            "No timeline file given; pass --path or set TIMEBAND_PATH.",
            param_hint="'--path'",
        )
    return resolved


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def parse(
    label: Annotated[str, typer.Option("--label", "-l", help="The label for this entry.")],
    start: Annotated[int, typer.Option("--start", "-s", help="The start year or point year.")],
    end: Annotated[int, typer.Option("--end", "-e", help="The end year.")],
    tag: Annotated[
        str | None,
        typer.Option("--tag", "-t", help="An optional tag for the entry."),
    ] = None,
    yaml_output: Annotated[
        bool | None,
        typer.Option(
            "--yaml/--json",
            "-y/-j",
            help="Output YAML or JSON (default: TIMEBAND_YAML, else JSON).",
        ),
    ] = None,
    pretty: Annotated[
        bool,
        typer.Option("--pretty", "-p", help="Pretty print the output."),
    ] = False,
) -> None:
    """
    Parse some options into a serializable entry.

    Equal `--start` and `--end` produce a point; anything else a range.
    """
    entry = Entry.from_span(label, tag, start, end)
    if yaml_output is None:
        yaml_output = load_settings().yaml_output
    text = dump_entry(entry, yaml_output=yaml_output, pretty=pretty)
    typer.echo(text, nl=pretty)


@app.command()  # type: ignore[misc]
def render(
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            dir_okay=False,
            help="Path to the .yml file to load from (default: TIMEBAND_PATH).",
        ),
    ] = None,
    tag_filter: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Filter results by their tag."),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Filter results by their label."),
    ] = None,
    text: Annotated[
        bool,
        typer.Option("--text", "-t", help="Print outputs rather than rendering them as HTML."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Load a timeline file and render it.

    The whole output is built before anything is printed, so a failure
    never leaves a partial timeline on stdout.
    """
    timeline = _resolve_path(path)
    mode = RenderMode.TEXT if text else RenderMode.HTML

    try:
        entries = load_entries(timeline)
        selected = filter_entries(entries, tag=tag_filter, search=search)
        logger.info(
            "Rendering %d of %d entries from %s", len(selected), len(entries), timeline
        )
        output = render_entries(selected, mode)
    except TimelineError as e:
        raise _fail("Render Error", e, verbose=verbose) from e

    typer.echo(output)


if __name__ == "__main__":
    app()
