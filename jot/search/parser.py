"""Parse jot query syntax into an AST."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from jot.search.ast_nodes import Clause, Query
from jot.search.dates import parse_date_bound
from jot.search.errors import (
    ErrorKind,
    QuerySyntaxError,
    SearchParseError,
    format_parse_error,
)
from jot.search.fields import SUPPORTED_FIELDS, Field, FieldSpec, Operator, field_table
from jot.search.help import HELP_TEXT
from jot.search.lexer import Lexer, Token, TokenKind

log = logging.getLogger(__name__)


class QueryParser:
    """Single-pass parser from query strings to :class:`Query` values.

    Args:
        fields: Field specs recognized as ``name:value`` prefixes.
        today: Reference day for relative dates (``today``, ``this-week``).
            Defaults to the current date at parse time.
    """

    def __init__(
        self,
        fields: Iterable[FieldSpec] = SUPPORTED_FIELDS,
        today: date | None = None,
    ) -> None:
        self.fields = field_table(tuple(fields))
        self.today = today
        self._lexer = Lexer(self.fields)

    def tokenize(self, query_string: str) -> list[Token]:
        return self._lexer.tokenize(query_string)

    def parse_tokens(self, tokens: Iterable[Token], raw: str = "") -> Query:
        """Classify each token into a clause, preserving token order.

        Raises:
            QuerySyntaxError: On an unknown field or an invalid date literal.
        """
        clauses = tuple(self._clause(token) for token in tokens)
        return Query(clauses=clauses, raw=raw)

    def _clause(self, token: Token) -> Clause:
        if not token.text:
            raise QuerySyntaxError(
                ErrorKind.GENERIC_SYNTAX, "empty search term", position=token.position
            )

        if token.kind is not TokenKind.FIELD_FILTER:
            return Clause(Field.ANY, Operator.EQ, token.text, token.negated)

        spec = self.fields.get(token.field or "")
        if spec is None:
            raise QuerySyntaxError(
                ErrorKind.GENERIC_SYNTAX,
                f"unknown field '{token.field}'",
                position=token.position,
            )

        if spec.is_date:
            bound = parse_date_bound(token.text, today=self.today, position=token.position)
            return Clause(spec.field, bound.operator, bound, token.negated)

        return Clause(spec.field, Operator.EQ, token.text, token.negated)

    def parse(self, query_string: str) -> Query:
        """Parse a query string into a Query AST.

        Args:
            query_string: The search query to parse.

        Returns:
            A Query AST. Blank input gives the empty query.

        Raises:
            SearchParseError: If the query cannot be parsed.
        """
        raw = query_string.strip()
        if not raw:
            return Query(raw="")

        try:
            query = self.parse_tokens(self.tokenize(query_string), raw=raw)
        except QuerySyntaxError as e:
            raise format_parse_error(query_string, e) from e

        log.debug("Parsed query %r into %d clause(s)", raw, len(query.clauses))
        return query

    def validate(self, query_string: str) -> None:
        """Check that a query string is syntactically valid.

        Raises:
            SearchParseError: If the query cannot be parsed.
        """
        self.parse(query_string)

    def help(self) -> str:
        """Return the syntax reference shown to users."""
        return HELP_TEXT


_parser = QueryParser()


def parse_query(query_string: str) -> Query:
    """Parse a query string with the default field set.

    Raises:
        SearchParseError: If the query cannot be parsed.
    """
    return _parser.parse(query_string)


def validate_query(query_string: str) -> None:
    """Raise :class:`SearchParseError` if ``query_string`` is invalid."""
    _parser.validate(query_string)


__all__ = ["QueryParser", "SearchParseError", "parse_query", "validate_query"]
