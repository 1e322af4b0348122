"""Command-line interface for jot."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from jot import __version__
from jot.config import Config, load_config
from jot.exceptions import JotError
from jot.utils.output import (
    error,
    set_color,
    set_pager,
    set_verbosity,
    warning,
)


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False
        self.pager: bool | None = None  # None = auto


pass_context = click.make_pass_decorator(Context, ensure=True)

# Run when the first argument names no subcommand: `jot tag:work`
DEFAULT_COMMAND = "search"


class JotGroup(click.Group):
    """Command group that treats an unknown first word as a search query."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            args = [DEFAULT_COMMAND, *args]
        return super().resolve_command(ctx, args)


@click.group(cls=JotGroup)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/jot/config.toml)",
)
@click.option(
    "--notebook",
    "-N",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    help="Path to the notebook directory (overrides config)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.option(
    "--pager/--no-pager",
    default=None,
    help="Force pager on/off (default: auto-detect)",
)
@click.version_option(version=__version__, prog_name="jot")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    notebook: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
    pager: bool | None,
) -> None:
    """jot: Search a notebook of markdown notes.

    Notes are markdown files with optional YAML front matter (title, tags,
    status, created, modified). Search them with a small query language:
    free text, "exact phrases", field filters, date ranges and negation.

    Configuration is loaded from ~/.config/jot/config.toml by default.
    Use --config to specify an alternative configuration file.

    Anything that is not a command name is handed to `search`, so
    `jot tag:work` is short for `jot search tag:work`.

    \b
    Examples:
      jot tag:work title:meeting
      jot tag:work -- -tag:done
      jot search --syntax
    """
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet
    app_ctx.pager = pager

    set_verbosity(verbose=verbose, debug=debug)
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    set_pager(pager)

    # Color is disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    try:
        loaded_config, warnings = load_config(config)
        app_ctx.config = loaded_config

        if notebook is not None:
            loaded_config.notebook = notebook.expanduser().resolve()
            # The override exists, so config warnings about the notebook are moot
            warnings = [w for w in warnings if not w.startswith("Notebook ")]

        if not disable_color and not loaded_config.colored_output:
            set_color(False)

        if not quiet:
            for warn in warnings:
                warning(warn)

    except (JotError, OSError) as e:
        error(str(e))
        ctx.exit(1)


def register_commands() -> None:
    """Attach the subcommands listed in :mod:`jot.commands`."""
    from jot.commands import load_commands

    for command in load_commands():
        cli.add_command(command)


register_commands()
