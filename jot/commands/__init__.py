"""Subcommands of the ``jot`` group.

Each module listed in :data:`COMMAND_MODULES` exposes its click command as
``cli``.
"""

from __future__ import annotations

import importlib

import click

COMMAND_MODULES: tuple[str, ...] = ("search", "init_config")


def load_commands() -> list[click.Command]:
    """Import the command modules and return their commands in order."""
    return [importlib.import_module(f"{__name__}.{name}").cli for name in COMMAND_MODULES]
