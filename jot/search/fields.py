"""Field and operator vocabulary of the query language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Field(Enum):
    """Note attribute a clause is matched against."""

    ANY = "any"
    TAG = "tag"
    TITLE = "title"
    BODY = "body"
    PATH = "path"
    CREATED = "created"
    MODIFIED = "modified"
    STATUS = "status"


class Operator(Enum):
    """Comparison operator. Only date fields use anything but ``EQ``."""

    EQ = "="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="


# Longest first so ">=" wins over ">".
OPERATOR_PREFIXES: tuple[tuple[str, Operator], ...] = (
    (">=", Operator.GTE),
    ("<=", Operator.LTE),
    (">", Operator.GT),
    ("<", Operator.LT),
)

DATE_FIELDS: frozenset[Field] = frozenset({Field.CREATED, Field.MODIFIED})


@dataclass(frozen=True)
class FieldSpec:
    """A field name usable as ``name:value`` in a query."""

    name: str
    field: Field
    description: str
    example: str

    @property
    def is_date(self) -> bool:
        return self.field in DATE_FIELDS


SUPPORTED_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("tag", Field.TAG, "Filter by tag", "tag:work"),
    FieldSpec("title", Field.TITLE, "Search in title", "title:meeting"),
    FieldSpec("body", Field.BODY, "Search in body only", "body:important"),
    FieldSpec("path", Field.PATH, "Filter by path prefix", "path:projects/"),
    FieldSpec("created", Field.CREATED, "Filter by creation date", "created:>2024-01-01"),
    FieldSpec("modified", Field.MODIFIED, "Filter by modification date", "modified:<2024-06-30"),
    FieldSpec("status", Field.STATUS, "Filter by status field", "status:todo"),
)


def field_table(specs: tuple[FieldSpec, ...] = SUPPORTED_FIELDS) -> dict[str, FieldSpec]:
    """Index field specs by the name used in query text (case-sensitive)."""
    return {spec.name: spec for spec in specs}
