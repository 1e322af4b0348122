"""Resolve date literals such as ``2024``, ``2024-06`` or ``>=2024-06-15``."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from jot.search.ast_nodes import DateBound
from jot.search.errors import ErrorKind, QuerySyntaxError
from jot.search.fields import OPERATOR_PREFIXES, Operator

_DATE_RE = re.compile(r"(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?")


def split_operator(raw: str) -> tuple[Operator, str]:
    """Split a leading comparison operator off a date filter value."""
    for prefix, operator in OPERATOR_PREFIXES:
        if raw.startswith(prefix):
            return operator, raw[len(prefix) :]
    return Operator.EQ, raw


def _midnight(day: date) -> datetime:
    return datetime(day.year, day.month, day.day)


def _next_month(start: datetime) -> datetime:
    if start.month == 12:
        return datetime(start.year + 1, 1, 1)
    return datetime(start.year, start.month + 1, 1)


def _relative_range(literal: str, today: date) -> tuple[datetime, datetime] | None:
    """Range for ``today``, ``yesterday``, ``this-week`` and ``this-month``."""
    keyword = literal.lower()
    if keyword == "today":
        start = _midnight(today)
        return start, start + timedelta(days=1)
    if keyword == "yesterday":
        end = _midnight(today)
        return end - timedelta(days=1), end
    if keyword == "this-week":
        # Weeks start on Monday
        start = _midnight(today - timedelta(days=today.weekday()))
        return start, start + timedelta(days=7)
    if keyword == "this-month":
        start = datetime(today.year, today.month, 1)
        return start, _next_month(start)
    return None


def date_range(literal: str, today: date | None = None) -> tuple[datetime, datetime]:
    """Return the half-open ``[start, end)`` range a date literal covers.

    Raises:
        ValueError: If the literal matches no supported precision.
    """
    relative = _relative_range(literal, today or date.today())
    if relative is not None:
        return relative

    match = _DATE_RE.fullmatch(literal)
    if match is None:
        raise ValueError(f"unrecognized date format: {literal}")

    year, month, day = match.groups()
    try:
        if month is None:
            return datetime(int(year), 1, 1), datetime(int(year) + 1, 1, 1)
        if day is None:
            start = datetime(int(year), int(month), 1)
            return start, _next_month(start)
        start = datetime(int(year), int(month), int(day))
        return start, start + timedelta(days=1)
    except OverflowError as e:
        # 9999-12-31 has no following day
        raise ValueError(f"date out of range: {literal}") from e


def parse_date_bound(
    raw: str,
    *,
    today: date | None = None,
    position: int | None = None,
) -> DateBound:
    """Parse a ``created``/``modified`` filter value into a :class:`DateBound`.

    Raises:
        QuerySyntaxError: With kind ``INVALID_DATE`` when the value is not a
            supported date literal.
    """
    operator, literal = split_operator(raw)
    if not literal:
        raise QuerySyntaxError(
            ErrorKind.INVALID_DATE, f"missing date after '{raw}'", position=position
        )

    try:
        start, end = date_range(literal, today)
    except ValueError as e:
        raise QuerySyntaxError(
            ErrorKind.INVALID_DATE, f"invalid date {literal!r}: {e}", position=position
        ) from e

    return DateBound(start=start, end=end, operator=operator)
