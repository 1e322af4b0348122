"""Query syntax errors and their user-facing diagnostics."""

from __future__ import annotations

from enum import Enum

from jot.exceptions import JotError

DOUBLE_COLON_SUGGESTION = "use single colon for field:value"
TRAILING_COLON_SUGGESTION = "add a value after the colon (e.g., tag:work)"


class ErrorKind(Enum):
    """Where in the pipeline a query was rejected."""

    LEX_ERROR = "lex_error"
    TRAILING_COLON = "trailing_colon"
    DOUBLE_COLON = "double_colon"
    INVALID_DATE = "invalid_date"
    GENERIC_SYNTAX = "generic_syntax"


class QuerySyntaxError(Exception):
    """Low-level failure raised by the lexer or parser.

    Never escapes ``jot.search``: ``QueryParser.parse`` converts it into a
    :class:`SearchParseError` via :func:`format_parse_error`.
    """

    def __init__(self, kind: ErrorKind, detail: str, position: int | None = None) -> None:
        self.kind = kind
        self.detail = detail
        self.position = position
        if position is None:
            super().__init__(detail)
        else:
            super().__init__(f"{detail} at position {position}")


class SearchParseError(JotError):
    """Raised when a search query cannot be parsed.

    Attributes:
        message: Human-readable description, always including the cause.
        input: The original query string, verbatim.
        suggestion: Actionable hint, empty when none applies.
        kind: The :class:`ErrorKind` that triggered the failure.
        position: Character offset of the offending token, if known.
    """

    def __init__(
        self,
        message: str,
        input: str,
        suggestion: str = "",
        kind: ErrorKind = ErrorKind.GENERIC_SYNTAX,
        position: int | None = None,
    ) -> None:
        self.message = message
        self.input = input
        self.suggestion = suggestion
        self.kind = kind
        self.position = position
        if suggestion:
            super().__init__(f"{message}. Did you mean: {suggestion}?")
        else:
            super().__init__(message)


def format_parse_error(input: str, cause: QuerySyntaxError) -> SearchParseError:
    """Turn a low-level syntax failure into a user-facing diagnostic.

    The error kind decides the message prefix and suggestion. Lexical
    failures that do not carry a specific kind still get a colon hint when
    the input itself shows the mistake. Invalid dates get the generic
    message; their ``kind`` still sets them apart.
    """
    kind = cause.kind
    stripped = input.strip()

    if kind is ErrorKind.DOUBLE_COLON or (
        kind in (ErrorKind.LEX_ERROR, ErrorKind.GENERIC_SYNTAX) and "::" in input
    ):
        prefix = "unexpected character or token"
        suggestion = DOUBLE_COLON_SUGGESTION
    elif kind is ErrorKind.TRAILING_COLON or (
        kind in (ErrorKind.LEX_ERROR, ErrorKind.GENERIC_SYNTAX) and stripped.endswith(":")
    ):
        prefix = "incomplete query"
        suggestion = TRAILING_COLON_SUGGESTION
    else:
        prefix = "invalid query syntax"
        suggestion = ""

    return SearchParseError(
        message=f"{prefix}: {cause}",
        input=input,
        suggestion=suggestion,
        kind=kind,
        position=cause.position,
    )
