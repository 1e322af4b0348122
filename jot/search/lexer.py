"""Split a raw query string into phrase, field-filter and bare-term tokens."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from jot.search.errors import ErrorKind, QuerySyntaxError
from jot.search.fields import SUPPORTED_FIELDS

QUOTE = '"'
NEGATE = "-"
FIELD_SEP = ":"


class TokenKind(Enum):
    PHRASE = "phrase"
    FIELD_FILTER = "field_filter"
    BARE_TERM = "bare_term"


@dataclass(frozen=True)
class Token:
    """One lexical unit of a query.

    ``text`` is the token's value with quotes and the field prefix removed.
    ``field`` is only set for ``FIELD_FILTER`` tokens. ``position`` is the
    offset of the token (including a leading ``-``) in the input.
    """

    kind: TokenKind
    text: str
    negated: bool = False
    field: str | None = None
    position: int = 0


class Lexer:
    """Tokenizer bound to a fixed set of field names.

    Field names are matched case-sensitively. A ``name:value`` word whose
    name is not in the set is an ordinary bare term, colon included.
    """

    def __init__(self, field_names: Iterable[str]) -> None:
        self.field_names = frozenset(field_names)

    def tokenize(self, text: str) -> list[Token]:
        """Tokenize ``text``.

        Raises:
            QuerySyntaxError: On an unterminated quote or a field filter
                without a value.
        """
        tokens: list[Token] = []
        i = 0
        n = len(text)

        while i < n:
            if text[i].isspace():
                i += 1
                continue

            start = i
            negated = False
            if text[i] == NEGATE and i + 1 < n and not text[i + 1].isspace():
                negated = True
                i += 1

            if text[i] == QUOTE:
                value, i = self._read_quoted(text, i)
                # "" carries no search text
                if value:
                    tokens.append(Token(TokenKind.PHRASE, value, negated, position=start))
                continue

            end = self._scan_word(text, i)
            token, i = self._classify(text, text[i:end], end, negated, start)
            tokens.append(token)

        return tokens

    def _scan_word(self, text: str, i: int) -> int:
        """Return the end offset of the word starting at ``i``."""
        n = len(text)
        while i < n and not text[i].isspace() and text[i] != QUOTE:
            i += 1
        return i

    def _read_quoted(self, text: str, i: int) -> tuple[str, int]:
        """Read a quoted region starting at the opening quote at ``i``."""
        close = text.find(QUOTE, i + 1)
        if close == -1:
            raise QuerySyntaxError(ErrorKind.LEX_ERROR, "unterminated quote", position=i)
        return text[i + 1 : close], close + 1

    def _classify(
        self, text: str, word: str, end: int, negated: bool, start: int
    ) -> tuple[Token, int]:
        colon = word.find(FIELD_SEP)
        if colon <= 0 or word[:colon] not in self.field_names:
            return Token(TokenKind.BARE_TERM, word, negated, position=start), end

        name = word[:colon]
        value = word[colon + 1 :]

        if value.startswith(FIELD_SEP):
            raise QuerySyntaxError(
                ErrorKind.DOUBLE_COLON,
                f"double colon after field '{name}'",
                position=start,
            )

        if value:
            return Token(TokenKind.FIELD_FILTER, value, negated, name, start), end

        # field:"quoted value"
        if end < len(text) and text[end] == QUOTE:
            quoted, after = self._read_quoted(text, end)
            if not quoted:
                raise QuerySyntaxError(
                    ErrorKind.LEX_ERROR,
                    f"empty value for field '{name}'",
                    position=start,
                )
            return Token(TokenKind.FIELD_FILTER, quoted, negated, name, start), after

        raise QuerySyntaxError(
            ErrorKind.TRAILING_COLON,
            f"missing value after '{name}:'",
            position=start,
        )


DEFAULT_LEXER = Lexer(spec.name for spec in SUPPORTED_FIELDS)


def tokenize(text: str, field_names: Iterable[str] | None = None) -> list[Token]:
    """Tokenize ``text`` with the default field names, or ``field_names`` if given."""
    lexer = DEFAULT_LEXER if field_names is None else Lexer(field_names)
    return lexer.tokenize(text)
