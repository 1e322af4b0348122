"""Unit tests for query error diagnostics."""

from __future__ import annotations

import pytest

from jot.exceptions import JotError
from jot.search.errors import (
    DOUBLE_COLON_SUGGESTION,
    TRAILING_COLON_SUGGESTION,
    ErrorKind,
    QuerySyntaxError,
    SearchParseError,
    format_parse_error,
)
from jot.search.parser import parse_query


class TestQuerySyntaxError:
    def test_str_without_position(self) -> None:
        assert str(QuerySyntaxError(ErrorKind.LEX_ERROR, "bad input")) == "bad input"

    def test_str_with_position(self) -> None:
        err = QuerySyntaxError(ErrorKind.LEX_ERROR, "bad input", position=3)
        assert str(err) == "bad input at position 3"


class TestSearchParseError:
    def test_is_jot_error(self) -> None:
        assert issubclass(SearchParseError, JotError)

    def test_str_with_suggestion(self) -> None:
        err = SearchParseError("incomplete query: x", "tag:", "add a value")
        assert str(err) == "incomplete query: x. Did you mean: add a value?"

    def test_str_without_suggestion(self) -> None:
        err = SearchParseError("invalid query syntax: x", "q")
        assert str(err) == "invalid query syntax: x"
        assert err.kind is ErrorKind.GENERIC_SYNTAX
        assert err.position is None


class TestFormatParseError:
    @pytest.mark.parametrize(
        ("kind", "prefix", "suggestion"),
        [
            (ErrorKind.DOUBLE_COLON, "unexpected character or token", DOUBLE_COLON_SUGGESTION),
            (ErrorKind.TRAILING_COLON, "incomplete query", TRAILING_COLON_SUGGESTION),
            (ErrorKind.INVALID_DATE, "invalid query syntax", ""),
            (ErrorKind.GENERIC_SYNTAX, "invalid query syntax", ""),
            (ErrorKind.LEX_ERROR, "invalid query syntax", ""),
        ],
    )
    def test_kind_mapping(self, kind: ErrorKind, prefix: str, suggestion: str) -> None:
        cause = QuerySyntaxError(kind, "boom", position=0)
        err = format_parse_error("query", cause)
        assert err.message == f"{prefix}: boom at position 0"
        assert err.suggestion == suggestion
        assert err.kind is kind
        assert err.input == "query"
        assert err.position == 0

    def test_lex_error_with_double_colon_in_input(self) -> None:
        cause = QuerySyntaxError(ErrorKind.LEX_ERROR, "unterminated quote", position=9)
        err = format_parse_error('std::map "x', cause)
        assert err.message.startswith("unexpected character or token: ")
        assert err.suggestion == DOUBLE_COLON_SUGGESTION

    def test_generic_error_with_trailing_colon_in_input(self) -> None:
        cause = QuerySyntaxError(ErrorKind.GENERIC_SYNTAX, "empty search term")
        err = format_parse_error("something:  ", cause)
        assert err.message == "incomplete query: empty search term"
        assert err.suggestion == TRAILING_COLON_SUGGESTION

    def test_message_contains_cause(self) -> None:
        cause = QuerySyntaxError(ErrorKind.INVALID_DATE, "invalid date 'soon'")
        err = format_parse_error("created:soon", cause)
        assert "invalid date 'soon'" in err.message


class TestEndToEndDiagnostics:
    def test_trailing_colon_message(self) -> None:
        with pytest.raises(SearchParseError) as exc_info:
            parse_query("tag:")
        err = exc_info.value
        assert err.message.startswith("incomplete query: ")
        assert str(err).endswith(f". Did you mean: {TRAILING_COLON_SUGGESTION}?")

    def test_double_colon_message(self) -> None:
        with pytest.raises(SearchParseError) as exc_info:
            parse_query("title::x")
        assert exc_info.value.message.startswith("unexpected character or token: ")

    def test_invalid_date_message(self) -> None:
        with pytest.raises(SearchParseError) as exc_info:
            parse_query("created:2024-13-45")
        err = exc_info.value
        assert err.message.startswith("invalid query syntax: invalid date '2024-13-45'")
        assert err.suggestion == ""
        assert err.kind is ErrorKind.INVALID_DATE

    def test_last_representable_day(self) -> None:
        with pytest.raises(SearchParseError) as exc_info:
            parse_query("created:9999-12-31")
        assert exc_info.value.kind is ErrorKind.INVALID_DATE
        assert "out of range" in exc_info.value.message

    def test_unterminated_quote_message(self) -> None:
        with pytest.raises(SearchParseError) as exc_info:
            parse_query('"oops')
        err = exc_info.value
        assert err.kind is ErrorKind.LEX_ERROR
        assert err.suggestion == ""
        assert err.position == 0
