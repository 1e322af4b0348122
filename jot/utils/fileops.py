"""Owner-only file writes for the jot configuration."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

PRIVATE_DIR_MODE = 0o700
PRIVATE_FILE_MODE = 0o600


def private_mkdir(path: Path) -> None:
    """Create *path* (and parents) and restrict it to the owner.

    An existing directory is left alone: the config may be written next to
    other files, e.g. ``--output ./jot.toml``.
    """
    if path.is_dir():
        return
    path.mkdir(parents=True)
    path.chmod(PRIVATE_DIR_MODE)


def write_private_text(path: Path, content: str) -> None:
    """Replace *path* with *content*, readable by the owner only.

    The text goes to a sibling temp file first, so a failed write leaves
    any previous version of *path* untouched.
    """
    private_mkdir(path.parent)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}-", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        os.fchmod(fd, PRIVATE_FILE_MODE)
        with open(fd, "w", encoding="utf-8") as f:
            f.write(content)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
