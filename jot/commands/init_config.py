"""Write a starter jot configuration file."""

from __future__ import annotations

import re
from importlib import resources
from pathlib import Path

import click
import tomli_w
from rich.markup import escape

from jot.cli import Context, pass_context
from jot.config import get_default_config_path
from jot.utils.fileops import write_private_text
from jot.utils.output import error, info, success, warning

# The `path = ...` line of the [notebook] table in config.example.toml
_NOTEBOOK_PATH_RE = re.compile(r"^(\[notebook\]\n(?:#.*\n)*)path = .*$", re.MULTILINE)


def _load_example_config() -> str:
    """Load the example configuration from package data."""
    return resources.files("jot").joinpath("config.example.toml").read_text()


def render_config(notebook: Path | None = None) -> str:
    """Return the example config, pointed at *notebook* when given.

    The example's comments are kept; only the notebook path line changes.
    """
    content = _load_example_config()
    if notebook is None:
        return content
    path_line = tomli_w.dumps({"path": notebook.as_posix()}).strip()
    return _NOTEBOOK_PATH_RE.sub(lambda m: m.group(1) + path_line, content, count=1)


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/jot/config.toml)",
)
@click.option(
    "--notebook",
    "-n",
    "notebook_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Notebook directory to record in the config (default: ~/notes)",
)
@pass_context
def cli(ctx: Context, force: bool, output: Path | None, notebook_dir: Path | None) -> None:
    """Create a configuration file readable only by you.

    \b
    Examples:
      jot init-config
      jot init-config --notebook ~/Documents/notes
      jot init-config --output ./jot.toml --force
    """
    config_path = (output or get_default_config_path()).expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {escape(str(config_path))}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    if notebook_dir is not None:
        notebook_dir = notebook_dir.expanduser().resolve()
        if not notebook_dir.is_dir():
            warning(f"Notebook not found: {escape(str(notebook_dir))}")

    try:
        write_private_text(config_path, render_config(notebook_dir))
    except OSError as e:
        error(f"Failed to write config file: {escape(str(e))}")
        raise SystemExit(1) from e

    success(f"Created config file: {escape(str(config_path))}")
    if notebook_dir is None:
        info(escape("Edit [notebook] path to point at your notes."))
