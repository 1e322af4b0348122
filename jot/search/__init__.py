"""Search query parsing and evaluation for jot notes."""

from jot.search.ast_nodes import Clause, DateBound, Query
from jot.search.errors import ErrorKind, SearchParseError
from jot.search.fields import SUPPORTED_FIELDS, Field, FieldSpec, Operator
from jot.search.help import HELP_TEXT
from jot.search.parser import QueryParser, parse_query, validate_query
from jot.search.query import execute_search, matches

__all__ = [
    "HELP_TEXT",
    "SUPPORTED_FIELDS",
    "Clause",
    "DateBound",
    "ErrorKind",
    "Field",
    "FieldSpec",
    "Operator",
    "Query",
    "QueryParser",
    "SearchParseError",
    "execute_search",
    "matches",
    "parse_query",
    "validate_query",
]
