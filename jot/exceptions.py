"""Exception hierarchy for jot."""

from pathlib import Path


class JotError(Exception):
    """Base exception for all jot errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all jot errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(JotError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Notebook Errors
class NotebookError(JotError):
    """Notebook-related errors."""

    pass


class NotebookNotFoundError(NotebookError):
    """Notebook directory doesn't exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Notebook not found: {path}")


class NoteLoadError(NotebookError):
    """A note file could not be read or its front matter is invalid."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")
