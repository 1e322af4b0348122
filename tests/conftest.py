"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from jot.notes.models import NoteRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file pointing at an empty notebook."""
    notebook = temp_dir / "notes"
    notebook.mkdir()
    config_path = temp_dir / "config.toml"
    config_path.write_text(f"""[notebook]
path = "{notebook.as_posix()}"

[display]
colored_output = false

[search]
default_format = "paths"
default_limit = 10
""")
    return config_path


def _build_note(
    path: str,
    *,
    title: str | None = None,
    body: str = "",
    status: str = "",
    tags: tuple[str, ...] = (),
    created: datetime | None = None,
    modified: datetime | None = None,
) -> NoteRecord:
    return NoteRecord.build(
        title=title if title is not None else Path(path).stem,
        body=body,
        path=path,
        status=status,
        tags=tags,
        created=created or datetime(2024, 1, 1, 12, 0),
        modified=modified or datetime(2024, 1, 1, 12, 0),
    )


@pytest.fixture
def make_note() -> Callable[..., NoteRecord]:
    """Factory for NoteRecords with sensible defaults."""
    return _build_note


@pytest.fixture
def corpus() -> list[NoteRecord]:
    """Four notes: "golang" appears in three, "javascript" in two."""
    return [
        _build_note(
            "golang-tips.md",
            title="Go Notes",
            body="Use Golang channels for concurrency.",
            status="todo",
            tags=("go", "programming"),
            created=datetime(2023, 12, 31, 23, 59),
            modified=datetime(2024, 6, 1, 8, 0),
        ),
        _build_note(
            "javascript-basics.md",
            title="JavaScript Basics",
            body="Closures in javascript, compared with golang. 2 + 2 = 4",
            status="draft",
            tags=("js",),
            created=datetime(2024, 1, 1, 0, 0),
            modified=datetime(2024, 1, 20, 10, 0),
        ),
        _build_note(
            "web/frontend.md",
            title="Frontend",
            body="A javascript framework overview in 2 columns.",
            status="done",
            tags=("web", "Work"),
            created=datetime(2024, 1, 1, 23, 59, 59),
            modified=datetime(2024, 7, 4, 12, 0),
        ),
        _build_note(
            "projects/backend.md",
            title="Backend services",
            body="Our GOLANG services talk to postgres.",
            status="todo",
            tags=("go", "work"),
            created=datetime(2024, 1, 2, 0, 0),
            modified=datetime(2025, 2, 1, 9, 0),
        ),
    ]


NOTEBOOK_FILES: dict[str, str] = {
    "projects/meeting-notes.md": """---
title: Weekly Meeting
tags: [work, meeting]
status: todo
created: 2024-01-15
modified: 2024-06-20T09:30:00
---
Discussed the project plan and next steps.
""",
    "projects/roadmap.md": """---
title: Roadmap
tags: work, planning
status: done
created: 2023-11-02
modified: 2024-02-01
---
Quarterly goals. The plan for the project is ambitious.
""",
    "personal/recipes.md": """---
tags:
  - "#cooking"
created: 2024-03-10
modified: 2024-03-11
---
Pasta with tomato sauce.
""",
    "archive/old.md": """---
title: Old Ideas
tags: [archived]
status: archived
created: 2022-05-05
modified: 2022-05-06
---
Things we no longer do.
""",
    "inbox.md": "No front matter here, just a quick idea about golang.\n",
}


@pytest.fixture
def sample_notebook(temp_dir: Path) -> Path:
    """Write a small notebook of markdown notes to disk."""
    root = temp_dir / "notebook"
    for rel_path, content in NOTEBOOK_FILES.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    # Hidden directories are never searched
    hidden = root / ".trash" / "deleted.md"
    hidden.parent.mkdir(parents=True)
    hidden.write_text("---\ntitle: Deleted\n---\nmeeting\n", encoding="utf-8")

    return root
