"""Configuration management for jot."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from jot.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from jot.utils.fileops import write_private_text

OUTPUT_FORMATS: tuple[str, ...] = ("table", "paths", "json")


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "jot" / "config.toml"


def get_default_notebook_path() -> Path:
    """Get the default notebook directory."""
    return Path.home() / "notes"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        notebook: Directory holding the markdown notes.
        colored_output: Whether to use colored terminal output.
        default_format: Output format of ``jot search`` (table, paths, json).
        default_limit: Maximum number of search results, 0 for no limit.
        config_path: Path where config was loaded from (None if defaults).
    """

    notebook: Path = field(default_factory=get_default_notebook_path)
    colored_output: bool = True
    default_format: str = "table"
    default_limit: int = 0
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.

        Raises:
            ConfigValidationError: If a critical validation fails.
        """
        warnings: list[str] = []

        self.notebook = self.notebook.expanduser().resolve()

        # Warn only: the notebook may be created later
        if not self.notebook.exists():
            warnings.append(f"Notebook not found: {self.notebook}")
        elif not self.notebook.is_dir():
            warnings.append(f"Notebook is not a directory: {self.notebook}")

        if self.default_format not in OUTPUT_FORMATS:
            raise ConfigValidationError(
                "search.default_format",
                self.default_format,
                f"must be one of {', '.join(OUTPUT_FORMATS)}",
            )

        if self.default_limit < 0:
            warnings.append(
                f"search.default_limit={self.default_limit} is negative, treating as unlimited"
            )
            self.default_limit = 0

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: jot init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    for section in ("notebook", "display", "search"):
        if not isinstance(data.get(section, {}), dict):
            raise ConfigValidationError(section, data[section], "must be a table")

    # Parse [notebook] section
    notebook = data.get("notebook", {})
    if "path" in notebook:
        value = notebook["path"]
        if not isinstance(value, str):
            raise ConfigValidationError("notebook.path", value, "must be a string path")
        config.notebook = Path(value)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    # Parse [search] section
    search = data.get("search", {})
    if "default_format" in search:
        value = search["default_format"]
        if not isinstance(value, str):
            raise ConfigValidationError("search.default_format", value, "must be a string")
        config.default_format = value

    if "default_limit" in search:
        value = search["default_limit"]
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError("search.default_limit", value, "must be an integer")
        config.default_limit = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()

    data: dict[str, Any] = {
        "notebook": {
            "path": str(config.notebook),
        },
        "display": {
            "colored_output": config.colored_output,
        },
        "search": {
            "default_format": config.default_format,
            "default_limit": config.default_limit,
        },
    }

    write_private_text(config_path, tomli_w.dumps(data))
