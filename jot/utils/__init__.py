"""Utility modules for jot."""

from jot.utils.output import (
    console,
    error,
    info,
    success,
    warning,
)

__all__ = [
    "console",
    "error",
    "info",
    "success",
    "warning",
]
