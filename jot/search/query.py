"""Evaluate a parsed Query against note records."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime
from typing import Callable

from jot.notes.models import NoteRecord
from jot.search.ast_nodes import Clause, DateBound, Query
from jot.search.fields import Field, Operator

log = logging.getLogger(__name__)


def _contains(haystack: str | None, needle: str) -> bool:
    """Case-insensitive substring test."""
    if not haystack:
        return False
    return needle.lower() in haystack.lower()


def _local_naive(instant: datetime | date | None) -> datetime | None:
    """Normalize a note timestamp for comparison with a DateBound.

    Aware datetimes are converted to local time, plain dates become midnight.
    """
    if instant is None:
        return None
    if not isinstance(instant, datetime):
        return datetime(instant.year, instant.month, instant.day)
    if instant.tzinfo is not None:
        return instant.astimezone().replace(tzinfo=None)
    return instant


def _in_bound(instant: datetime | date | None, bound: DateBound) -> bool:
    t = _local_naive(instant)
    if t is None:
        return False

    op = bound.operator
    if op is Operator.GT:
        return t >= bound.end
    if op is Operator.LT:
        return t < bound.start
    if op is Operator.GTE:
        return t >= bound.start
    if op is Operator.LTE:
        return t < bound.end
    return bound.start <= t < bound.end


def _match_any(value: str, note: NoteRecord) -> bool:
    return _contains(note.searchable_text, value)


def _match_tag(value: str, note: NoteRecord) -> bool:
    wanted = value.lower()
    return any(tag.lower() == wanted for tag in note.tags)


def _match_title(value: str, note: NoteRecord) -> bool:
    return _contains(note.title, value)


def _match_body(value: str, note: NoteRecord) -> bool:
    return _contains(note.body, value)


def _match_status(value: str, note: NoteRecord) -> bool:
    return _contains(note.status, value)


def _match_path(value: str, note: NoteRecord) -> bool:
    # Directory prefix, case-sensitive like the file system
    return bool(note.path) and note.path.startswith(value)


_TEXT_MATCHERS: dict[Field, Callable[[str, NoteRecord], bool]] = {
    Field.ANY: _match_any,
    Field.TAG: _match_tag,
    Field.TITLE: _match_title,
    Field.BODY: _match_body,
    Field.STATUS: _match_status,
    Field.PATH: _match_path,
}

_DATE_ATTRIBUTES: dict[Field, str] = {
    Field.CREATED: "created",
    Field.MODIFIED: "modified",
}


def _match_clause(clause: Clause, note: NoteRecord) -> bool:
    """Evaluate a clause ignoring its negation flag."""
    value = clause.value

    if isinstance(value, DateBound):
        attr = _DATE_ATTRIBUTES.get(clause.field)
        if attr is None:
            return False
        return _in_bound(getattr(note, attr), value)

    matcher = _TEXT_MATCHERS.get(clause.field)
    if matcher is None:
        return False
    return matcher(value, note)


def clause_matches(clause: Clause, note: NoteRecord) -> bool:
    """Evaluate a single clause, honoring negation."""
    result = _match_clause(clause, note)
    return not result if clause.negated else result


def matches(query: Query, note: NoteRecord) -> bool:
    """Return True if ``note`` satisfies every clause of ``query``.

    The empty query matches every note. Evaluation never raises and has no
    side effects, so it is safe to call concurrently.
    """
    return all(clause_matches(clause, note) for clause in query.clauses)


def execute_search(notes: Iterable[NoteRecord], query: Query) -> list[NoteRecord]:
    """Filter notes by a parsed Query.

    Args:
        notes: Candidate notes, for example from ``jot.notes.loader``.
        query: Parsed Query AST.

    Returns:
        The matching notes, in input order.
    """
    candidates = list(notes)
    if query.is_empty:
        return candidates

    results = [note for note in candidates if matches(query, note)]
    log.debug(
        "Search %r matched %d of %d note(s)",
        query.raw,
        len(results),
        len(candidates),
    )
    return results
