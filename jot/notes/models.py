"""Read-only note records consumed by the search evaluator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class NoteRecord:
    """One note as seen by search.

    Attributes:
        title: Display title (front matter ``title`` or the file stem).
        body: Markdown body without front matter.
        path: POSIX path relative to the notebook root, file name included.
        status: Front matter ``status``, empty when unset.
        tags: Tags from front matter.
        created: Creation instant.
        modified: Last modification instant.
        searchable_text: Text that bare terms and phrases are matched against.
    """

    title: str
    body: str
    path: str
    status: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)
    created: datetime | None = None
    modified: datetime | None = None
    searchable_text: str = ""

    @classmethod
    def build(
        cls,
        *,
        title: str,
        body: str,
        path: str,
        status: str = "",
        tags: Iterable[str] = (),
        created: datetime | None = None,
        modified: datetime | None = None,
    ) -> NoteRecord:
        """Create a record with ``searchable_text`` composed from its parts."""
        tag_set = frozenset(tags)
        return cls(
            title=title,
            body=body,
            path=path,
            status=status,
            tags=tag_set,
            created=created,
            modified=modified,
            searchable_text=compose_searchable_text(title, body, path, tag_set),
        )


def compose_searchable_text(title: str, body: str, path: str, tags: Iterable[str]) -> str:
    """Join title, body, path and tags into one newline-separated blob."""
    return "\n".join([title, body, path, " ".join(sorted(tags))])
