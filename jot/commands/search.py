"""Search notes with the jot query language."""

from __future__ import annotations

import io
import json
from datetime import datetime

import click
from rich.console import Console
from rich.markup import escape

from jot.cli import Context, pass_context
from jot.config import OUTPUT_FORMATS
from jot.exceptions import NotebookError
from jot.notes.loader import load_notebook
from jot.notes.models import NoteRecord
from jot.search.help import HELP_TEXT
from jot.search.parser import SearchParseError, parse_query
from jot.search.query import execute_search
from jot.utils.output import (
    THEME,
    console,
    create_table,
    debug,
    error,
    error_console,
    info,
    pager_print,
    verbose,
)

EXIT_SUCCESS = 0
EXIT_NO_RESULTS = 0
EXIT_PARSE_ERROR = 1
EXIT_NOTEBOOK_ERROR = 2
EXIT_NO_NOTEBOOK = 3

# Columns that --sort accepts, mapped to NoteRecord attributes
SORT_COLUMNS: dict[str, str] = {
    "title": "title",
    "path": "path",
    "status": "status",
    "created": "created",
    "modified": "modified",
}


def _clip_text(value: str, max_width: int | None) -> str:
    """Truncate text to max_width, appending ellipsis if clipped."""
    if max_width is None or len(value) <= max_width:
        return value
    if max_width <= 1:
        return value[:max_width]
    return value[: max_width - 1] + "…"


def _format_date(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M")


def _sort_notes(notes: list[NoteRecord], sort_col: str) -> list[NoteRecord]:
    descending = sort_col.startswith("-")
    attr = SORT_COLUMNS[sort_col.lstrip("-")]

    def _sort_key(note: NoteRecord):
        v = getattr(note, attr)
        # None and empty values sort last regardless of direction
        if v is None or v == "":
            return (1, "")
        if isinstance(v, str):
            return (0, v.lower())
        return (0, v)

    present = [n for n in notes if _sort_key(n)[0] == 0]
    missing = [n for n in notes if _sort_key(n)[0] == 1]
    return sorted(present, key=_sort_key, reverse=descending) + missing


@click.command("search")
@click.argument("query", nargs=-1, required=False)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS)),
    default=None,
    help="Output format (default: from config, usually table)",
)
@click.option(
    "--limit",
    "-l",
    type=int,
    default=None,
    help="Limit number of results (0 = no limit)",
)
@click.option(
    "--sort",
    "-s",
    "sort_col",
    default=None,
    help=f"Sort by column ({', '.join(SORT_COLUMNS)}). Prefix with - for descending",
)
@click.option(
    "--clip",
    "-W",
    type=int,
    default=40,
    show_default=True,
    help="Max width for the title column (0 = no clip)",
)
@click.option(
    "--syntax",
    is_flag=True,
    default=False,
    help="Show the query syntax reference and exit",
)
@pass_context
def cli(
    ctx: Context,
    query: tuple[str, ...],
    output_format: str | None,
    limit: int | None,
    sort_col: str | None,
    clip: int,
    syntax: bool,
) -> None:
    """Search notes by text, fields and dates.

    QUERY is a jot search string. Multiple arguments are joined with
    spaces. Without a query every note is listed.

    \b
    Syntax examples:
      jot search meeting
      jot search '"project plan"'
      jot search tag:work status:todo
      jot search "created:>2024-01-01 -archived"
      jot search -- path:projects/ -tag:done

    \b
    Output formats:
      --format table   Rich table (default)
      --format paths   One note path per line (for piping)
      --format json    JSON array of note objects

    Separate a query that starts with a negated term from the options
    with --, or quote the whole query.

    Run 'jot search --syntax' for the full query reference.
    """
    if syntax:
        click.echo(HELP_TEXT, nl=False)
        raise SystemExit(EXIT_SUCCESS)

    config = ctx.config
    if config is None:
        error("Configuration not loaded")
        raise SystemExit(EXIT_NO_NOTEBOOK)

    if sort_col is not None and sort_col.lstrip("-") not in SORT_COLUMNS:
        error(
            f"Unknown sort column: {sort_col.lstrip('-')}",
            hint=f"Available: {', '.join(SORT_COLUMNS)}",
        )
        raise SystemExit(EXIT_PARSE_ERROR)

    output_format = output_format or config.default_format
    if limit is None:
        limit = config.default_limit
    clip_width: int | None = clip if clip > 0 else None

    query_string = " ".join(query)

    # Parse before touching the notebook: an invalid query yields nothing
    try:
        parsed = parse_query(query_string)
    except SearchParseError as e:
        error(escape(e.message), hint=escape(e.suggestion) if e.suggestion else None)
        error_console.print(f"  [info]Query:[/info] {escape(e.input)}")
        raise SystemExit(EXIT_PARSE_ERROR)

    debug(f"Parsed {len(parsed.clauses)} clause(s) from: {escape(query_string)}")

    notebook = config.notebook
    if not notebook.is_dir():
        error(f"Notebook not found: {notebook}", hint="Set [notebook] path or pass --notebook")
        raise SystemExit(EXIT_NO_NOTEBOOK)

    try:
        notes = load_notebook(notebook)
    except NotebookError as e:
        error(str(e))
        raise SystemExit(EXIT_NOTEBOOK_ERROR)

    verbose(f"Loaded {len(notes)} notes from {notebook}")

    results = execute_search(notes, parsed)

    if sort_col is not None:
        results = _sort_notes(results, sort_col)

    if limit and limit > 0:
        results = results[:limit]

    if not results:
        info(f"No notes found matching: {escape(query_string)}")
        raise SystemExit(EXIT_NO_RESULTS)

    if output_format == "table":
        _print_table(results, query_string, clip_width)
    elif output_format == "paths":
        _print_paths(results)
    elif output_format == "json":
        _print_json(results)

    raise SystemExit(EXIT_SUCCESS)


def _print_table(notes: list[NoteRecord], query_string: str, clip_width: int | None) -> None:
    """Print results as a Rich table, using pager when appropriate."""
    if query_string:
        info(f"Search: {escape(query_string)} ({len(notes)} results)")
    else:
        info(f"All notes ({len(notes)} results)")

    table = create_table(show_header=True, header_style="bold")
    table.add_column("Title", style="note.title", no_wrap=True)
    table.add_column("Tags", style="note.tags", no_wrap=True)
    table.add_column("Status", style="note.status", no_wrap=True)
    table.add_column("Modified", justify="right", no_wrap=True)
    table.add_column("Path", style="path", no_wrap=True)

    for note in notes:
        table.add_row(
            escape(_clip_text(note.title, clip_width)),
            escape(", ".join(sorted(note.tags))),
            escape(note.status),
            _format_date(note.modified),
            escape(note.path),
        )

    # Render to a buffer so the output can go through the pager
    buf = io.StringIO()
    render_console = Console(
        file=buf,
        theme=THEME,
        force_terminal=not console.no_color,
        width=1000,
        no_color=console.no_color,
    )
    render_console.print(table)

    pager_print(buf.getvalue(), header_lines=3)


def _print_paths(notes: list[NoteRecord]) -> None:
    """Print one note path per line."""
    for note in notes:
        click.echo(note.path)


def _print_json(notes: list[NoteRecord]) -> None:
    """Print results as JSON array."""
    results = []
    for note in notes:
        results.append(
            {
                "path": note.path,
                "title": note.title,
                "status": note.status,
                "tags": sorted(note.tags),
                "created": note.created.isoformat() if note.created else None,
                "modified": note.modified.isoformat() if note.modified else None,
            }
        )
    click.echo(json.dumps(results, indent=2))
