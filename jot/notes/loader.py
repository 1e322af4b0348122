"""Load markdown notes with YAML front matter from a notebook directory."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date, datetime
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from jot.exceptions import NotebookNotFoundError, NoteLoadError
from jot.notes.models import NoteRecord

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


def _parse_frontmatter(text: str, path: Path) -> tuple[dict[str, Any], str]:
    """Split raw note text into ``(metadata, body)``.

    Raises:
        NoteLoadError: If the front matter block is not valid YAML.
    """
    if not text:
        return {}, ""

    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as e:
        raise NoteLoadError(path, f"front matter contains invalid YAML: {e}") from e
    except ValueError as e:
        raise NoteLoadError(path, f"unable to parse front matter: {e}") from e

    return dict(post.metadata or {}), post.content or ""


def _normalize_tags(raw: Any) -> list[str]:
    """Accept ``[a, b]``, ``"a, b"`` or ``"#a #b"`` and return clean tag names."""
    if raw is None:
        return []
    if isinstance(raw, str):
        items = raw.replace(",", " ").split()
    elif isinstance(raw, (list, tuple, set)):
        items = [str(item) for item in raw if item is not None]
    else:
        items = [str(raw)]

    tags: list[str] = []
    for item in items:
        tag = item.strip().lstrip("#")
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def _coerce_datetime(value: Any, path: Path, key: str) -> datetime | None:
    """Convert a front matter date value into a naive local datetime."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            logger.warning("Ignoring unparseable %s date in %s: %r", key, path, value)
            return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    logger.warning("Ignoring %s value of type %s in %s", key, type(value).__name__, path)
    return None


def load_note(path: Path, root: Path) -> NoteRecord:
    """Load one markdown note.

    Args:
        path: Path to the note file.
        root: Notebook root; the record's ``path`` is relative to it.

    Returns:
        A NoteRecord for the note.

    Raises:
        NoteLoadError: If the file can't be read, isn't UTF-8, or has
            invalid front matter.
    """
    try:
        raw_text = path.read_text(encoding="utf-8")
        stat = path.stat()
    except UnicodeDecodeError as e:
        raise NoteLoadError(path, "not UTF-8 encoded") from e
    except OSError as e:
        raise NoteLoadError(path, str(e)) from e

    metadata, body = _parse_frontmatter(raw_text, path)

    title = metadata.get("title")
    if not isinstance(title, str) or not title.strip():
        title = path.stem

    status = metadata.get("status")
    status = str(status) if status is not None else ""

    tags = _normalize_tags(metadata.get("tags", metadata.get("tag")))

    mtime = datetime.fromtimestamp(stat.st_mtime)
    birth = getattr(stat, "st_birthtime", None)
    created = _coerce_datetime(metadata.get("created"), path, "created")
    if created is None:
        created = datetime.fromtimestamp(birth) if birth is not None else mtime
    modified = _coerce_datetime(metadata.get("modified"), path, "modified") or mtime

    return NoteRecord.build(
        title=title,
        body=body,
        path=path.relative_to(root).as_posix(),
        status=status,
        tags=tags,
        created=created,
        modified=modified,
    )


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def iter_notes(root: Path) -> Iterator[NoteRecord]:
    """Yield every note below ``root`` in path order.

    Hidden files and directories are skipped. Notes that fail to load are
    logged and skipped.
    """
    for note_path in sorted(root.rglob(f"*{NOTE_SUFFIX}")):
        if not note_path.is_file() or _is_hidden(note_path, root):
            continue
        try:
            yield load_note(note_path, root)
        except NoteLoadError as e:
            logger.warning("Skipping note: %s", e)


def load_notebook(root: Path) -> list[NoteRecord]:
    """Load all notes of a notebook directory.

    Raises:
        NotebookNotFoundError: If ``root`` is not a directory.
    """
    root = root.expanduser()
    if not root.is_dir():
        raise NotebookNotFoundError(root)
    notes = list(iter_notes(root))
    logger.debug("Loaded %d note(s) from %s", len(notes), root)
    return notes
