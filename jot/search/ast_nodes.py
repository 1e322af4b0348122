"""AST data classes for parsed search queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from jot.search.fields import Field, Operator


@dataclass(frozen=True)
class DateBound:
    """Half-open instant range ``[start, end)`` of a date literal.

    ``start``/``end`` are naive local datetimes covering the literal's
    precision: ``2024`` spans the year, ``2024-06`` the month and
    ``2024-06-15`` the day. ``operator`` says how a note's timestamp is
    compared against the range:

        - ``EQ``: ``start <= t < end``
        - ``GT``: ``t >= end``
        - ``LT``: ``t < start``
        - ``GTE``: ``t >= start``
        - ``LTE``: ``t < end``
    """

    start: datetime
    end: datetime
    operator: Operator = Operator.EQ


ClauseValue = Union[str, DateBound]


@dataclass(frozen=True)
class Clause:
    """A single filter condition.

    ``value`` is a literal string for text fields and a ``DateBound`` for
    ``created``/``modified``. It is never empty.
    """

    field: Field
    operator: Operator
    value: ClauseValue
    negated: bool = False


@dataclass(frozen=True)
class Query:
    """Top-level search query: clauses implicitly ANDed together."""

    clauses: tuple[Clause, ...] = field(default_factory=tuple)
    raw: str = ""

    @property
    def is_empty(self) -> bool:
        """An empty query matches every note."""
        return not self.clauses
